import os

# Headless rendering for the matplotlib output tests
os.environ.setdefault("MPLBACKEND", "Agg")
