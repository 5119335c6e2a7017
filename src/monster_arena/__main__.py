"""Allow ``python -m monster_arena``."""
import sys

from monster_arena.main import main

sys.exit(main())
