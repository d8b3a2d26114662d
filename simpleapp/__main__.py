from simpleapp.main import main

main()
