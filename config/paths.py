from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT / "logs"

# === Bundled data tables ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
SCHEDULING_DATA_PATH = CONFIG_DIR / "scheduling_demo.json"
ROUTING_DATA_PATH = CONFIG_DIR / "routing_demo.json"

# === Default log file path ===
LOG_PATH = LOG_DIR / "model_run.log"
