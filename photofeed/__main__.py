import sys

from photofeed.main import main

sys.exit(main())
