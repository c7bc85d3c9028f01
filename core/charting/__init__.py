"""Line chart options, payload decoding and rendering helpers.

Geometry is computed by the pure `analysis` package. This package adapts it
to HTTP: it validates request payloads, encodes geometry snapshots and draws
them as SVG.
"""
