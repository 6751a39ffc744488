"""CPU path tracer for small scenes of spheres and quads.

This package renders a static scene by stochastic path tracing, with:
- Diffuse, specular and emissive surfaces from a single material model
- Sphere and quad primitives tested exhaustively (no acceleration structure)
- Scanline-parallel rendering on a fixed pool of worker threads
- Exposure, ACES tone mapping and gamma correction before output
- ASCII PPM and PNG output

Subpackages:
    core: Vector math, colors, rays, the integrator and the renderer
    geometry: Shape primitives and intersection algorithms
    materials: The surface material model
    scene: Scene container, traversal and the Cornell box scene
    preview: Image buffer, file export and Matplotlib preview
"""

__version__ = "0.1.0"
