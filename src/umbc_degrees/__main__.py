from umbc_degrees.degree_scraper import main

main()
