from splitme.cli import main

main()
