"""Layout math and drawing passes for line charts.

The modules here are ordered leaves first: ``ranges`` holds the tick and
coordinate math, ``layout`` sizes the plot area and resolves axis ranges,
``draw`` issues renderer commands, and ``chart`` sequences a full render.
"""
