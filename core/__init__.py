"""Split-tracking stopwatch core: timing, split tree, dispatch and export."""
