"""Outcome → gRPC status 변환.

매핑 규칙:
    - INVALID_INPUT → INVALID_ARGUMENT (+ google.rpc.BadRequest, ErrorInfo)
    - INTERNAL → INTERNAL ("internal error")
    - CANCELLED → CANCELLED, 데드라인이 지났으면 DEADLINE_EXCEEDED

검증 위반은 grpc-status-details-bin trailing metadata로 전달되며
필드별 위반 규칙은 ErrorInfo.metadata에 {field: rule} 형태로 담깁니다.
"""

from __future__ import annotations

import grpc
from google.protobuf import any_pb2
from google.rpc import code_pb2, error_details_pb2, status_pb2
from grpc_status import rpc_status

from apps.sso.application.outcome import Outcome, OutcomeKind
from apps.sso.setup.constants import SERVICE_NAME

VALIDATION_ERROR_REASON = "REQUEST_VALIDATION_FAILED"
DEADLINE_EXCEEDED_MESSAGE = "deadline exceeded"


def _pack(message) -> any_pb2.Any:
    detail = any_pb2.Any()
    detail.Pack(message)
    return detail


def _invalid_argument_status(outcome: Outcome) -> status_pb2.Status:
    bad_request = error_details_pb2.BadRequest(
        field_violations=[
            error_details_pb2.BadRequest.FieldViolation(
                field=violation.field,
                description=violation.message,
            )
            for violation in outcome.violations
        ]
    )
    error_info = error_details_pb2.ErrorInfo(
        reason=VALIDATION_ERROR_REASON,
        domain=SERVICE_NAME,
        metadata={violation.field: violation.rule for violation in outcome.violations},
    )
    return status_pb2.Status(
        code=code_pb2.INVALID_ARGUMENT,
        message=outcome.message,
        details=[_pack(bad_request), _pack(error_info)],
    )


def _cancelled_status(outcome: Outcome, time_remaining: float | None) -> status_pb2.Status:
    if time_remaining is not None and time_remaining <= 0:
        return status_pb2.Status(
            code=code_pb2.DEADLINE_EXCEEDED,
            message=DEADLINE_EXCEEDED_MESSAGE,
        )
    return status_pb2.Status(code=code_pb2.CANCELLED, message=outcome.message)


def to_rpc_status(outcome: Outcome, time_remaining: float | None = None) -> grpc.Status:
    """실패 Outcome을 grpc.Status로 변환.

    Args:
        outcome: SUCCESS가 아닌 Outcome
        time_remaining: 호출 데드라인까지 남은 시간 (CANCELLED 구분용)

    Raises:
        ValueError: SUCCESS Outcome이 전달된 경우
    """
    if outcome.kind is OutcomeKind.SUCCESS:
        raise ValueError("Success outcome has no error status")

    if outcome.kind is OutcomeKind.INVALID_INPUT:
        status = _invalid_argument_status(outcome)
    elif outcome.kind is OutcomeKind.CANCELLED:
        status = _cancelled_status(outcome, time_remaining)
    else:
        status = status_pb2.Status(code=code_pb2.INTERNAL, message=outcome.message)

    return rpc_status.to_status(status)
