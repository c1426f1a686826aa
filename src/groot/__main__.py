from groot.cli import main

main()
