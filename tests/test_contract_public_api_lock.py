from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import smartflow.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(list(api.__all__), list(api._PUBLIC_EXPORTS))

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"smartflow.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name), f"smartflow.api {name} is None")

    def test_public_exports_are_sorted_and_unique(self) -> None:
        import smartflow.api as api

        self.assertIsInstance(api._PUBLIC_EXPORTS, tuple)
        self.assertEqual(len(set(api._PUBLIC_EXPORTS)), len(api._PUBLIC_EXPORTS))
        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))

    def test_package_reexports_match_api_all(self) -> None:
        import smartflow
        import smartflow.api as api

        for name in api.__all__:
            self.assertTrue(hasattr(smartflow, name), f"smartflow package does not re-export: {name}")
            self.assertIs(getattr(smartflow, name), getattr(api, name), f"smartflow.{name} must be same object as smartflow.api.{name}")

    def test_graph_dict_and_render_html(self) -> None:
        from smartflow import Schedule, graph_dict, render_html

        g = graph_dict("A", [Schedule(id="A", title="Plan", date="2026-01-01")])
        self.assertEqual(g["nodes"], [{"scheduleId": "A", "level": 0, "x": 400.0, "y": 100.0, "isFocus": True}])
        self.assertIn('id="sf-data"', render_html([Schedule(id="A", title="Plan", date="2026-01-01")]))


if __name__ == "__main__":
    unittest.main(verbosity=2)
