"""
Command-Line Interface for gedent

Entry point for running gedent from the command line.
It parses command-line arguments and delegates to the WorkflowManager.
"""
import logging
import subprocess
import sys
from typing import List, Optional
from gedent.core.errors import GedentError
from gedent.core.utils.argument_parser import parse_arguments
from gedent.core.utils.path_utils import gedent_home
from gedent.core.workflow.workflow_manager import WorkflowManager

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    numeric_level = getattr(logging, args.log.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format="%(asctime)s - %(levelname)s - %(message)s")

    workflow = WorkflowManager(gedent_home(), args=args)
    try:
        workflow.run()
    except (GedentError, OSError, subprocess.CalledProcessError) as e:
        logging.error(str(e))
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
