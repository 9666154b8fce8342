# Demo: print the comparison for the default setup and a few deviations.
import logging

from .explorer import TailExplorer
from .report import summarize

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    explorer = TailExplorer(seed=0)
    for k in (1.0, 2.0, 3.0):
        explorer.set_sigmas(k)
        print(summarize(explorer.result(), details=k == 2.0))
        print()
