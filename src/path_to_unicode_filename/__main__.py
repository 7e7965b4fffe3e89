import sys

from path_to_unicode_filename.main import main

sys.exit(main())
