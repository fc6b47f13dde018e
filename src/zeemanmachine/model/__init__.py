"""
The MODEL layer contains pure data structures and the physics of the machine.
It has NO knowledge of the GUI (Qt) or of the solver.
"""
