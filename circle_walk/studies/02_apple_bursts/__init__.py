"""
Study 02: Apple Bursts

Apples at speed.

Questions to explore:
- How many ticks does a frame get while apples are alive?
- What happens to pacing the moment the last apple expires?
"""
