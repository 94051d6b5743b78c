"""
module terminput.__main__

Default entrypoint when terminput is invoked on the console by a user.
Calls the main() function in terminput.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
