"""
Builders

Turn compiled templates into finished input text: the molecule helpers
callable from a template body, the Jinja2 renderer, and the driver that
renders one input per geometry frame and names the output files.
"""
