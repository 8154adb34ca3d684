"""
Deterministic BBS calculation engine.

Pure Python math. No I/O, no global state.
Given a bar description and a code profile, produce the cutting length,
bar count, total length and weight for each bar, then roll them up per
component and per project.
"""
