"""Rendering subpackage.

Turns immutable ``State`` snapshots into images. The renderer draws the render
surface of :mod:`butterfly_effect.render` with flat Pillow primitives:

* Walls, trail walls and goals as colored squares.
* The token as a square with a triangle showing its facing.

See :mod:`butterfly_effect.renderer.image` for the drawing routines.
"""
