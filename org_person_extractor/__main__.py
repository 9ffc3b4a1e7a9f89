"""Allow running as ``python -m org_person_extractor``."""
import sys

from org_person_extractor.cli import main

sys.exit(main())
