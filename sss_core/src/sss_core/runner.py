"""Per-file orchestration: load, decode, reconstruct and optionally verify."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .config import DEFAULT_CONFIG, AppConfig
from .errors import ShareRecoveryError
from .inputs import case_from_path
from .logging import get_logger
from .models import CaseResult
from .service import decode_shares, reconstruct, verify_subsets

log = get_logger("sss_core.runner")


def process_case(
    path: Path,
    config: AppConfig | None = None,
    *,
    verify: Optional[bool] = None,
    max_subsets: Optional[int] = None,
) -> CaseResult:
    """Recover the secret described by one test-case file.

    Failures are recorded on the returned result instead of raised so a
    caller can carry on with the remaining files.
    """

    recovery = (config or DEFAULT_CONFIG).recovery
    verify = recovery.verify_subsets if verify is None else verify
    max_subsets = recovery.max_subsets if max_subsets is None else max_subsets
    source = str(path)
    result = CaseResult(source=source)
    try:
        case = case_from_path(path, strict_keys=recovery.strict_keys)
        result.n, result.k = case.n, case.k
        log.info("case.loaded", source=source, n=case.n, k=case.k, shares=len(case.records))
        if case.skipped_keys:
            log.warning("case.keys_skipped", source=source, keys=list(case.skipped_keys))
        result.records = list(case.records)
        result.points = decode_shares(case.records)
        if verify:
            report = verify_subsets(result.points, case.k, max_subsets=max_subsets)
            result.consistency = report
            result.secret = report.secret
            if not report.consistent:
                log.warning(
                    "case.inconsistent",
                    source=source,
                    mismatches=len(report.mismatches),
                    subsets_checked=report.subsets_checked,
                )
        else:
            result.secret = reconstruct(result.points, case.k)
    except (ShareRecoveryError, OSError) as exc:
        result.error = str(exc)
        log.error("case.failed", source=source, kind=type(exc).__name__, error=str(exc))
        return result
    # the secret itself is never logged
    log.info("case.recovered", source=source, secret_bits=result.secret.bit_length())
    return result


def run_cases(
    paths: Iterable[Path],
    config: AppConfig | None = None,
    *,
    verify: Optional[bool] = None,
    max_subsets: Optional[int] = None,
) -> List[CaseResult]:
    return [
        process_case(path, config, verify=verify, max_subsets=max_subsets)
        for path in paths
    ]


__all__ = ["process_case", "run_cases"]
