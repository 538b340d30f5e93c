import sys

from monty_sim.cli import main

sys.exit(main())
