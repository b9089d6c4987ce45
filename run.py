#!/usr/bin/env python3
"""
pianokeys Launcher
Run this script to open the demo keyboard (see pianokeys/main.py for options).
"""

if __name__ == "__main__":
    from pianokeys.main import run
    run()
