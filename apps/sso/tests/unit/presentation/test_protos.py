"""생성된 protobuf 모듈과 sso.proto 정의의 일치 테스트."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from google.protobuf.descriptor import FieldDescriptor

from apps.sso.presentation.grpc.protos import sso_pb2, sso_pb2_grpc

PROTO_PATH = Path(sso_pb2.__file__).with_name("sso.proto")

MESSAGE_BLOCK = re.compile(r"message\s+(\w+)\s*\{([^}]*)\}")
FIELD_LINE = re.compile(r"^\s*(\w+)\s+(\w+)\s*=\s*(\d+)\s*;", re.MULTILINE)
RPC_LINE = re.compile(r"rpc\s+(\w+)\s*\((\w+)\)\s*returns\s*\((\w+)\)")

SCALAR_TYPES = {
    "string": FieldDescriptor.TYPE_STRING,
    "int32": FieldDescriptor.TYPE_INT32,
    "int64": FieldDescriptor.TYPE_INT64,
    "bool": FieldDescriptor.TYPE_BOOL,
}


def _proto_messages() -> dict[str, list[tuple[str, str, int]]]:
    source = PROTO_PATH.read_text(encoding="utf-8")
    return {
        name: [(type_, field, int(number)) for type_, field, number in FIELD_LINE.findall(body)]
        for name, body in MESSAGE_BLOCK.findall(source)
    }


class TestGeneratedMessages:
    """sso_pb2 메시지 정의 테스트."""

    def test_message_set_matches_proto(self) -> None:
        assert set(sso_pb2.DESCRIPTOR.message_types_by_name) == set(_proto_messages())

    @pytest.mark.parametrize("message_name", sorted(_proto_messages()))
    def test_fields_match_proto(self, message_name: str) -> None:
        descriptor = sso_pb2.DESCRIPTOR.message_types_by_name[message_name]
        expected = _proto_messages()[message_name]

        actual = [(f.name, f.number, f.type) for f in descriptor.fields]

        assert actual == [(field, number, SCALAR_TYPES[type_]) for type_, field, number in expected]

    def test_package_is_auth(self) -> None:
        assert sso_pb2.DESCRIPTOR.package == "auth"


class TestGeneratedService:
    """sso_pb2_grpc 서비스 정의 테스트."""

    def test_rpcs_match_proto(self) -> None:
        rpcs = RPC_LINE.findall(PROTO_PATH.read_text(encoding="utf-8"))
        service = sso_pb2.DESCRIPTOR.services_by_name["Auth"]

        assert service.full_name == "auth.Auth"
        assert [(m.name, m.input_type.name, m.output_type.name) for m in service.methods] == rpcs

    def test_base_servicer_exposes_every_rpc(self) -> None:
        service = sso_pb2.DESCRIPTOR.services_by_name["Auth"]

        for method in service.methods:
            assert callable(getattr(sso_pb2_grpc.AuthServicer, method.name))
