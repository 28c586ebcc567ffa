# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: apps/sso/presentation/grpc/protos/sso.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n+apps/sso/presentation/grpc/protos/sso.proto\x12\x04\x61uth\"2\n\x0fRegisterRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x10\n\x08password\x18\x02 \x01(\t\"#\n\x10RegisterResponse\x12\x0f\n\x07user_id\x18\x01 \x01(\x03\"?\n\x0cLoginRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x10\n\x08password\x18\x02 \x01(\t\x12\x0e\n\x06\x61pp_id\x18\x03 \x01(\x05\"\x1e\n\rLoginResponse\x12\r\n\x05token\x18\x01 \x01(\t\"!\n\x0eIsAdminRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\x03\"#\n\x0fIsAdminResponse\x12\x10\n\x08is_admin\x18\x01 \x01(\x08\x32\xab\x01\n\x04\x41uth\x12\x39\n\x08Register\x12\x15.auth.RegisterRequest\x1a\x16.auth.RegisterResponse\x12\x30\n\x05Login\x12\x12.auth.LoginRequest\x1a\x13.auth.LoginResponse\x12\x36\n\x07IsAdmin\x12\x14.auth.IsAdminRequest\x1a\x15.auth.IsAdminResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'apps.sso.presentation.grpc.protos.sso_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _REGISTERREQUEST._serialized_start=53
  _REGISTERREQUEST._serialized_end=103
  _REGISTERRESPONSE._serialized_start=105
  _REGISTERRESPONSE._serialized_end=140
  _LOGINREQUEST._serialized_start=142
  _LOGINREQUEST._serialized_end=205
  _LOGINRESPONSE._serialized_start=207
  _LOGINRESPONSE._serialized_end=237
  _ISADMINREQUEST._serialized_start=239
  _ISADMINREQUEST._serialized_end=272
  _ISADMINRESPONSE._serialized_start=274
  _ISADMINRESPONSE._serialized_end=309
  _AUTH._serialized_start=312
  _AUTH._serialized_end=483
# @@protoc_insertion_point(module_scope)
