import sys

from nwsclient.cli import main

sys.exit(main())
