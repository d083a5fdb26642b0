"""Right triangle with its medians and the lines through its sides.

Layout:
   B (0,10)
     |\
     | \
     |  \
     |   \
   A (0,0) ---- C (10,0)
"""

from pathlib import Path

from planegeo.export.plot import render_scene
from planegeo.models import Line2D, Point2D, Segment2D, Triangle2D
from planegeo.processors import find_angle_between, find_intersection
from planegeo.scene import Scene

A = Point2D(label="A", x=0, y=0)
B = Point2D(label="B", x=0, y=10)
C = Point2D(label="C", x=10, y=0)

# --- Triangle ---
triangle = Triangle2D(a=A, b=B, c=C)
print(f"Triangle {triangle}")
print(f"   Angles: {triangle.first_angle:.1f}°, {triangle.second_angle:.1f}°, {triangle.third_angle:.1f}°")
print(f"   Right angle: {triangle.is_rectangular()}")

# --- Medians meet at the centroid ---
median_c = triangle.first_side_median("K")
median_a = triangle.second_side_median("L")
centroid = find_intersection(
    "G",
    Line2D.from_segment(median_c),
    Line2D.from_segment(median_a),
)
print(f"   Centroid: {centroid}")

# --- Sides as lines ---
ab = Line2D.from_segment(Segment2D(a=A, b=B))
bc = Line2D.from_points(B, C)
print(f"   AB: {ab}")
print(f"   BC: {bc}   (slope form: {bc.to_slope_form()})")
print(f"   Angle AB/BC: {find_angle_between(ab, bc):.1f}°")

# --- Save & render ---
scene = Scene(name="Right Triangle", points=[A, B, C, centroid], triangles=[triangle])
scene.segments.extend([median_c, median_a])
scene.lines.update({"AB": ab, "BC": bc})

output = Path(__file__).parent / "output"
output.mkdir(exist_ok=True)
scene.save(output / "right_triangle.json")
print(f"📁 Rendered to: {render_scene(scene, output / 'right_triangle.png')}")
