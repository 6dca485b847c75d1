import unittest
from unittest.mock import patch, MagicMock

from geocoord.geometry import Coordinate
from geocoord.route import Route
from geocoord.visualization import create_route_map, get_bounds


class TestCreateRouteMap(unittest.TestCase):

    def setUp(self):
        self.route = Route(
            [Coordinate(48.85341, 2.3488), Coordinate(45.41117, -75.69812)]
        )

    @patch('geocoord.visualization.folium.LayerControl')
    @patch('geocoord.visualization.folium.TileLayer')
    @patch('geocoord.visualization.folium.Map')
    @patch('geocoord.visualization.RouteLegend')
    @patch('geocoord.visualization.folium.PolyLine')
    @patch('geocoord.visualization.folium.Marker')
    def test_create_route_map_adds_layers_and_markers(
        self,
        mock_folium_marker,
        mock_folium_polyline,
        mock_route_legend,
        mock_folium_map,
        mock_folium_tilelayer,
        mock_folium_layercontrol,
    ):
        mock_map_instance = MagicMock(name="map_instance")
        mock_folium_map.return_value = mock_map_instance

        create_route_map(self.route, "test_route_map.html", fitness=1234.0)

        _, map_kwargs = mock_folium_map.call_args
        self.assertIsNone(map_kwargs.get('tiles'))

        self.assertEqual(mock_folium_tilelayer.call_count, 2)
        standard_kwargs = mock_folium_tilelayer.call_args_list[0][1]
        satellite_kwargs = mock_folium_tilelayer.call_args_list[1][1]
        self.assertEqual(standard_kwargs.get('name'), "Standard")
        self.assertEqual(satellite_kwargs.get('name'), "Satellite")
        mock_folium_layercontrol.return_value.add_to.assert_called_once_with(
            mock_map_instance
        )

        # One polyline through every stop in order
        mock_folium_polyline.assert_called_once()
        line_points = mock_folium_polyline.call_args[0][0]
        self.assertEqual(line_points, [[48.85341, 2.3488], [45.41117, -75.69812]])

        # One marker per stop
        self.assertEqual(mock_folium_marker.call_count, 2)
        mock_route_legend.assert_called_once_with(2, 1234.0)

        mock_map_instance.fit_bounds.assert_called_once_with(
            [[45.41117, -75.69812], [48.85341, 2.3488]]
        )
        mock_map_instance.save.assert_called_once_with("test_route_map.html")

    @patch('geocoord.visualization.folium.LayerControl')
    @patch('geocoord.visualization.folium.TileLayer')
    @patch('geocoord.visualization.folium.Map')
    @patch('geocoord.visualization.RouteLegend')
    @patch('geocoord.visualization.folium.PolyLine')
    @patch('geocoord.visualization.folium.Marker')
    def test_start_point_is_drawn_first(
        self,
        mock_folium_marker,
        mock_folium_polyline,
        mock_route_legend,
        mock_folium_map,
        mock_folium_tilelayer,
        mock_folium_layercontrol,
    ):
        start = Coordinate(-15.77972, -47.92972)

        create_route_map(self.route, "out.html", start=start)

        line_points = mock_folium_polyline.call_args[0][0]
        self.assertEqual(line_points[0], [-15.77972, -47.92972])
        self.assertEqual(len(line_points), 3)
        self.assertEqual(mock_folium_marker.call_count, 3)
        first_marker_args = mock_folium_marker.call_args_list[0][0]
        self.assertEqual(first_marker_args[0], [-15.77972, -47.92972])


class TestGetBounds(unittest.TestCase):

    def test_bounds(self):
        points = [Coordinate(10, -20), Coordinate(-5, 30), Coordinate(0, 0)]
        self.assertEqual(get_bounds(points), (-5.0, -20.0, 10.0, 30.0))


if __name__ == '__main__':
    unittest.main()
