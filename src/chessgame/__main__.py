from chessgame.app import main

main()
