import matplotlib

# Tests write PNGs without a display.
matplotlib.use("Agg")
