import sys

from vsm_search_engine.core.main import main

sys.exit(main())
