"""
Study 01: Random Walk

A handful of circles on a small canvas.

Questions to explore:
- How far does a circle wander in a thousand ticks?
- How quickly do colors drift away from where they started?
- What does the hue clamp look like near 0 and 360?
"""
