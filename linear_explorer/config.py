from __future__ import annotations

from pathlib import Path

# Paths and filenames
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "linear_explorer" / "data"

# Scene extent: the line spans x in [-LINE_EXTENT, LINE_EXTENT]
LINE_EXTENT = 10.0
LABEL_OFFSET = 0.3

# Parameter defaults and bounds
DEFAULT_PARAMS = {"a": 2.0, "b": -1.0}
PARAM_BOUNDS = {
    "a": {"min": -10.0, "max": 10.0, "step": 0.1},
    "b": {"min": -10.0, "max": 10.0, "step": 0.1},
}

# Presets wired to the example / reset buttons
EXAMPLES = {
    "example-1": (2.0, 1.0),
    "example-2": (-2.0, -1.0),
    "reset": (0.0, 0.0),
}

# Probe seeded into the table at start-up
INITIAL_PROBE_X = "1"

# Display precision
COEFFICIENT_DECIMALS = 1
POINT_DECIMALS = 2

# UI, mode, schema
UI_BASE_TOKEN = "linear-"
SCHEMA_VERSION = 1
FUNCTION_TYPE = "linear"
APP_MODE = "dash"

# Logging and tracing
EVENT_LOG_CAPACITY = 500

# CSV column order
SCHEMA_COLUMNS = [
    "schema_version",
    "session_id",
    "seq",
    "t_server_iso",
    "elapsed_time_ms",
    "event",
    "function_type",
    "param_name",
    "old_value",
    "new_value",
    "source",
    "a",
    "b",
    "x",
    "y",
    "message",
    "mode",
    "export_type",
]

# Scene palette
SCENE_COLORS = {
    "background": "#111827",
    "line": "#ffff00",
    "y_intercept": "#2563eb",
    "x_intercept": "#dc2626",
    "point": "#9333ea",
    "label": "rgba(255,255,255,0.9)",
    "grid": "#374151",
    "x_axis": "#ef4444",
    "y_axis": "#22c55e",
    "z_axis": "#3b82f6",
}
LINE_STYLE = {"color": SCENE_COLORS["line"], "width": 6}
Y_INTERCEPT_MARKER_STYLE = {"color": SCENE_COLORS["y_intercept"], "size": 8, "symbol": "circle"}
X_INTERCEPT_MARKER_STYLE = {"color": SCENE_COLORS["x_intercept"], "size": 8, "symbol": "circle"}
POINT_MARKER_STYLE = {"color": SCENE_COLORS["point"], "size": 6, "symbol": "circle"}
LABEL_FONT = {"color": SCENE_COLORS["label"], "size": 11, "family": "Arial"}
AXIS_LINE_STYLE = {"width": 4}
FIGURE_HEIGHT = 620

# Classification label tones (used by both front-ends)
CLASSIFICATION_TONES = {
    "increasing": "#16a34a",
    "decreasing": "#ea580c",
    "constant": "#6b7280",
}
