"""Grid painting, widgets, and the ANSI serializer.

``grid`` holds the styled character array and rectangle math, ``widgets``
the text/table widgets that paint into it, and ``backend`` turns a painted
grid into an escape-coded string.
"""
