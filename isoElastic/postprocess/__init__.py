"""
Post-processing: export of resolved parameter sets.
"""

from .export import export_json, export_csv, to_json_string, to_csv_string, load_json
