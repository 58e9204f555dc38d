from clickerengine.cli import main

main()
