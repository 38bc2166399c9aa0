# main.py
import json
import sys
from pathlib import Path

from netpath.app.build import build
from netpath.config.models import ScenarioModel


def run(config_path: str, source: str, target: str) -> dict:
    cfg = ScenarioModel.model_validate_json(Path(config_path).read_text(encoding="utf-8"))
    app = build(cfg)
    return app.paths.shortest_path(source, target).to_dict()


if __name__ == "__main__":
    if len(sys.argv) != 4:
        sys.exit("usage: python main.py SCENARIO.json SOURCE TARGET")
    print(json.dumps(run(*sys.argv[1:]), indent=2))
