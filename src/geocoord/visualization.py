#!/usr/bin/env python3
"""
Route visualization using folium maps.
"""

from typing import List, Optional, Tuple
import logging
import folium
from folium.template import Template

from .geometry import Coordinate
from .notation import format_notation
from .route import Route

logger = logging.getLogger(__name__)

ROUTE_COLOR = "#2E86AB"


class RouteLegend(folium.MacroElement):
    """Legend showing the number of stops and the route's fitness."""

    def __init__(self, stop_count: int, fitness: Optional[float] = None):
        super().__init__()
        self.stop_count = stop_count
        self.fitness_text = "" if fitness is None else f"{fitness / 1000:.2f} km"

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="route-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 200px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
        ">
            <b>Legend</b><br>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #2E86AB; font-weight: bold; font-size: 18px;">&mdash;</span>
                Route ({{ this.stop_count }} stops)
            </div>
            {% if this.fitness_text %}
            <div style="margin: 4px 0; line-height: 1.3;">
                Fitness: {{ this.fitness_text }}
            </div>
            {% endif %}
        </div>
        {% endmacro %}
        """
        )


def get_bounds(points: List[Coordinate]) -> Tuple[float, float, float, float]:
    """Return (south, west, north, east) of the points in decimal degrees."""
    latitudes = [p.latitude for p in points]
    longitudes = [p.longitude for p in points]
    return min(latitudes), min(longitudes), max(latitudes), max(longitudes)


def create_route_map(
    route: Route,
    output_filename: str,
    start: Optional[Coordinate] = None,
    fitness: Optional[float] = None,
) -> None:
    """
    Create an interactive map showing an ordered route, save as HTML.

    Args:
        route: Route whose stops are drawn and numbered in visiting order
        output_filename: Path where HTML map file should be saved
        start: Optional departure point drawn before the first stop
        fitness: Optional fitness value shown in the legend

    Raises:
        ValueError: If route is empty
    """
    if not route:
        raise ValueError("Cannot create map for empty route")

    points = list(route.coords) if start is None else [start] + list(route.coords)
    south, west, north, east = get_bounds(points)

    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    route_map = folium.Map(
        location=[center_lat, center_lon],
        tiles=None,
    )

    folium.TileLayer(
        tiles="CartoDB positron",
        attr=(
            "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
            "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
        ),
        name="Standard",
        control=True,
        show=True,
    ).add_to(route_map)

    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr=(
            "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
            "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
        ),
        name="Satellite",
        control=True,
        show=False,
    ).add_to(route_map)

    folium.LayerControl().add_to(route_map)

    folium.PolyLine(
        [[p.latitude, p.longitude] for p in points],
        color=ROUTE_COLOR,
        weight=3,
        opacity=0.7,
        popup="Route",
        z_index=1,
    ).add_to(route_map)

    if start is not None:
        folium.Marker(
            [start.latitude, start.longitude],
            popup=f"Start<br>{format_notation(start)}",
            icon=folium.Icon(color="green", icon="play"),
        ).add_to(route_map)

    for index, stop in enumerate(route, start=1):
        folium.Marker(
            [stop.latitude, stop.longitude],
            popup=f"Stop {index}<br>{format_notation(stop)}",
            icon=folium.Icon(color="blue", icon="flag"),
        ).add_to(route_map)

    route_map.add_child(RouteLegend(len(route), fitness))

    route_map.fit_bounds([[south, west], [north, east]])
    route_map.save(output_filename)

    logger.debug(f"Map saved to {output_filename} with {len(route)} stops")
