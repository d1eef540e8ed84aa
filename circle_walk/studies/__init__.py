"""
Studies: small runnable sketches.

Each study sets up a universe, runs it, and reports what it saw.

Study progression:
1. Random walk - a few circles, watched closely
2. Apple bursts - transient entities and frame pacing
"""
