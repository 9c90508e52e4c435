"""python -m pdfcr"""
import sys

from .cli import main

sys.exit(main())
