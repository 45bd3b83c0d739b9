#!/usr/bin/env python3
"""
Media Renaming Tool - compose a file's new name from author, series,
episode, title and extension fields while browsing a folder.
"""
import sys

from media_renamer.main_application import main as app_main

if __name__ == '__main__':
    sys.exit(app_main())
