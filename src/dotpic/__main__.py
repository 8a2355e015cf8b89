from dotpic.cli import main

main()
