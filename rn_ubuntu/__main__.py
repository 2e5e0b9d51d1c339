from rn_ubuntu.cli import main

main()
