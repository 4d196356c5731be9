from __future__ import annotations

from raytracer.typings.color import BLACK, Color
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.utils.tuples import Point, Vector


def lighting(material: Material, light: PointLight, position: Point, eye: Vector, normal: Vector) -> Color:
    """Phong reflection: ambient + diffuse + specular, left unclamped.

    eye and normal must be unit vectors; eye points from the surface toward the viewer.
    """
    effective_color = material.color * light.intensity
    light_vector = (light.position - position).normalize()
    ambient = effective_color * material.ambient

    # Diffuse component: kd * effective_color * dot(L, N)
    light_dot_normal = light_vector.dot(normal)
    if light_dot_normal <= 0.0:
        # light is on the other side of the surface
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    # Specular component (Phong): ks * intensity * dot(R, E)^shininess
    reflect_vector = (-light_vector).reflect(normal)
    reflect_dot_eye = reflect_vector.dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        specular = light.intensity * material.specular * (reflect_dot_eye ** material.shininess)

    return ambient + diffuse + specular
