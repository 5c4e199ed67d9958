import sys

from todo_list_app.cli import main

sys.exit(main())
