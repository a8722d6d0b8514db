"""Terminal raycaster over a procedurally carved grid maze."""
