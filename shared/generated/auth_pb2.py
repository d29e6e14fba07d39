# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hubinvest/auth.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as hubinvest_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x14hubinvest/auth.proto\x12\x0ehubinvest.auth\x1a\x16hubinvest/common.proto\"Q\n\x08UserInfo\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\r\n\x05\x65mail\x18\x02 \x01(\t\x12\x12\n\nfirst_name\x18\x03 \x01(\t\x12\x11\n\tlast_name\x18\x04 \x01(\t\"/\n\x0cLoginRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x10\n\x08password\x18\x02 \x01(\t\"\x80\x01\n\rLoginResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\r\n\x05token\x18\x02 \x01(\t\x12+\n\tuser_info\x18\x03 \x01(\x0b\x32\x18.hubinvest.auth.UserInfo\"%\n\x14ValidateTokenRequest\x12\r\n\x05token\x18\x01 \x01(\t\"\x9f\x01\n\x15ValidateTokenResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x10\n\x08is_valid\x18\x02 \x01(\x08\x12+\n\tuser_info\x18\x03 \x01(\x0b\x32\x18.hubinvest.auth.UserInfo\x12\x12\n\nexpires_at\x18\x04 \x01(\x03\x32\xb1\x01\n\x0b\x41uthService\x12\x44\n\x05Login\x12\x1c.hubinvest.auth.LoginRequest\x1a\x1d.hubinvest.auth.LoginResponse\x12\\\n\rValidateToken\x12$.hubinvest.auth.ValidateTokenRequest\x1a%.hubinvest.auth.ValidateTokenResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hubinvest.auth_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _USERINFO._serialized_start=64
  _USERINFO._serialized_end=145
  _LOGINREQUEST._serialized_start=147
  _LOGINREQUEST._serialized_end=194
  _LOGINRESPONSE._serialized_start=197
  _LOGINRESPONSE._serialized_end=325
  _VALIDATETOKENREQUEST._serialized_start=327
  _VALIDATETOKENREQUEST._serialized_end=364
  _VALIDATETOKENRESPONSE._serialized_start=367
  _VALIDATETOKENRESPONSE._serialized_end=526
  _AUTHSERVICE._serialized_start=529
  _AUTHSERVICE._serialized_end=706
# @@protoc_insertion_point(module_scope)
