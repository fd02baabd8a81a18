"""Parity checks between operation descriptors and the courier API contract."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
import re

from pedidosya_courier.client.dispatch import OPERATIONS
from pedidosya_courier.core.config import DEFAULT_COURIER_API_BASE_URL

CONTRACT_PATH = Path(__file__).resolve().parents[2] / "contracts" / "openapi.yaml"
PATH_PARAM = re.compile(r"\{[^}]+\}")


def _parse_contract_paths() -> dict[str, dict[str, set[int]]]:
    contract_map: dict[str, dict[str, set[int]]] = defaultdict(dict)
    current_path: str | None = None
    current_method: str | None = None

    body = CONTRACT_PATH.read_text(encoding="utf-8").split("\npaths:\n", 1)[1].split("\ncomponents:", 1)[0]
    for line in body.splitlines():
        if match := re.match(r"^  (/\S+):$", line):
            current_path = PATH_PARAM.sub("{}", match.group(1))
            current_method = None
        elif (match := re.match(r"^    (get|post|put|delete):$", line)) and current_path:
            current_method = match.group(1).upper()
            contract_map[current_path][current_method] = set()
        elif (match := re.match(r"^        '(\d{3})':$", line)) and current_path and current_method:
            contract_map[current_path][current_method].add(int(match.group(1)))

    return contract_map


def test_every_contract_endpoint_has_an_operation() -> None:
    contract_paths = _parse_contract_paths()
    implemented = {(PATH_PARAM.sub("{}", operation.path), operation.method) for operation in OPERATIONS}

    expected = {(path, method) for path, methods in contract_paths.items() for method in methods}
    assert expected == implemented


def test_error_variant_sets_match_documented_failure_statuses() -> None:
    contract_paths = _parse_contract_paths()

    for operation in OPERATIONS:
        documented = contract_paths[PATH_PARAM.sub("{}", operation.path)][operation.method]
        expected_errors = {code for code in documented if code >= 400}
        assert expected_errors == set(operation.error_model.documented_statuses), (
            f"Error status mismatch for {operation.name}: "
            f"expected {sorted(expected_errors)} got {sorted(operation.error_model.documented_statuses)}"
        )


def test_contract_server_matches_default_base_url() -> None:
    assert f"url: {DEFAULT_COURIER_API_BASE_URL}" in CONTRACT_PATH.read_text(encoding="utf-8")
