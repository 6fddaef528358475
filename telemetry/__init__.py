# telemetry/__init__.py
