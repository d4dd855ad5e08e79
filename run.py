"""Entry point for the cache simulator.

Usage:
    python run.py -s 4 -E 2 -b 4 -t traces/yi.trace
    python run.py -h    # full option list
"""
from csim.cli import main


if __name__ == '__main__':
    main(prog_name='csim')
