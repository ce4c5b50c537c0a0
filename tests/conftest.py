import sys
from pathlib import Path

import pytest


# Garante que `src/` está no PYTHONPATH quando rodar pytest no repo.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    p = tmp_path / "rules.yaml"
    p.write_text(
        """
format:
  - name: iam
    resource_type: user
    partition_required: true
    account_id_required: true
    resource_format: Path
  - name: sqs
    region_required: true
    account_id_required: true
    resource_format: Id
    region_wc_allowed: true
""",
        encoding="utf-8",
    )
    return p
