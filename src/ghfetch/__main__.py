from ghfetch.main import main

main()
