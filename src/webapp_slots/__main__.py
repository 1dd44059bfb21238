import sys

from webapp_slots.sample import main

sys.exit(main())
