"""
Drill JSON loading and serialization.
"""

from drill_tempo.data.drill_json import drill_to_dict, load_drill, parse_drill, save_drill

__all__ = ["drill_to_dict", "load_drill", "parse_drill", "save_drill"]
