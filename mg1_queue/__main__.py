from .scripts.run_simulation import main

main()
