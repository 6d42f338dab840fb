"""
Entry Point Script (Bootstrap)
==============================
Runs the demo from a source checkout without installing the package.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so imports like 'from forcelayout.model...'
   resolve without an editable install.

Usage:
    $ python run.py --vertices 60 --edges 90
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from forcelayout.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
