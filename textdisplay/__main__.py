"""Allow `python -m textdisplay`"""

from textdisplay.cli import main

main()
