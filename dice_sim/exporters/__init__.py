"""
Central exporter registry and registration decorator for simulation result exporters.
Use @register_exporter("name") above your exporter class to make it available to the CLI, GUI and scripts.
All exporter modules are imported here to ensure registration occurs.
"""

import os

EXPORTER_MAP = {}

def register_exporter(name):
	"""
	Decorator to register an exporter class under a given name.
	Usage:
		@register_exporter("history")
		class HistoryCsvExporter(Exporter): ...
	"""
	def decorator(cls):
		cls.name = name
		EXPORTER_MAP[name] = cls
		return cls
	return decorator


def get_exporter(name, config=None):
	"""
	Return an Exporter instance by name.
	Args:
		name (str): Registered exporter name (e.g., 'png').
		config (SimulationConfig|None): Passed to the exporter for file names and options.
	Raises:
		ValueError: If the name is unknown.
	"""
	key = name.lower()
	if key in EXPORTER_MAP:
		return EXPORTER_MAP[key](config)
	raise ValueError(f"Unknown exporter: {name}. Supported: {sorted(EXPORTER_MAP)}")


def export_all(result, names, out_dir, config=None):
	"""
	Run several exporters into one directory, each under its default file name.
	Returns:
		list[str]: Paths written, in the order of names.
	"""
	paths = []
	for name in names:
		exporter = get_exporter(name, config)
		paths.append(exporter.export(result, os.path.join(out_dir, exporter.default_filename())))
	return paths


# Automatically import all exporter modules in this directory to ensure registration decorators run
import importlib
import pkgutil

_this_dir = os.path.dirname(__file__)
_pkg_name = __name__
for _, modname, ispkg in pkgutil.iter_modules([_this_dir]):
	if not ispkg and modname not in ("__init__", "base"):
		importlib.import_module(f"{_pkg_name}.{modname}")
