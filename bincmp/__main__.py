from bincmp.run_bincmp import main

main()
