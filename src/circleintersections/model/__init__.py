"""
The MODEL layer contains pure data structures and geometry routines.
It has no I/O and no global state.
"""
