from petitsplats.cli import main

main()
