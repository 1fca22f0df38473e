#!/usr/bin/env python3
'''
Inspect a region file or extract one of its chunks.

 $ regiontool.py inspect -f r.0.0.mca
 $ regiontool.py extract -f r.0.0.mca -c 5 | xxd
'''
import sys

from regionfile.cli import main


if __name__ == '__main__':
    sys.exit(main())
