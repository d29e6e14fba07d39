# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hubinvest/user.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x14hubinvest/user.proto\x12\x0ehubinvest.user\")\n\x18UserValidateTokenRequest\x12\r\n\x05token\x18\x01 \x01(\t\"a\n\x19UserValidateTokenResponse\x12\r\n\x05valid\x18\x01 \x01(\x08\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\r\n\x05\x65mail\x18\x03 \x01(\t\x12\x15\n\rerror_message\x18\x04 \x01(\t\"3\n\x10UserLoginRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x10\n\x08password\x18\x02 \x01(\t\"j\n\x11UserLoginResponse\x12\x0f\n\x07success\x18\x01 \x01(\x08\x12\r\n\x05token\x18\x02 \x01(\t\x12\x0f\n\x07user_id\x18\x03 \x01(\t\x12\r\n\x05\x65mail\x18\x04 \x01(\t\x12\x15\n\rerror_message\x18\x05 \x01(\t\"]\n\x13RegisterUserRequest\x12\r\n\x05\x65mail\x18\x01 \x01(\t\x12\x10\n\x08password\x18\x02 \x01(\t\x12\x12\n\nfirst_name\x18\x03 \x01(\t\x12\x11\n\tlast_name\x18\x04 \x01(\t\"O\n\x14RegisterUserResponse\x12\x0f\n\x07success\x18\x01 \x01(\x08\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x15\n\rerror_message\x18\x03 \x01(\t\"(\n\x15GetUserProfileRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\"\xb2\x01\n\x16GetUserProfileResponse\x12\x0f\n\x07success\x18\x01 \x01(\x08\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\r\n\x05\x65mail\x18\x03 \x01(\t\x12\x12\n\nfirst_name\x18\x04 \x01(\t\x12\x11\n\tlast_name\x18\x05 \x01(\t\x12\x11\n\tis_active\x18\x06 \x01(\x08\x12\x16\n\x0e\x65mail_verified\x18\x07 \x01(\x08\x12\x15\n\rerror_message\x18\x08 \x01(\t\"\x14\n\x12HealthCheckRequest\"7\n\x13HealthCheckResponse\x12\x0f\n\x07healthy\x18\x01 \x01(\x08\x12\x0f\n\x07version\x18\x02 \x01(\t2\xdd\x03\n\x0bUserService\x12h\n\x11UserValidateToken\x12(.hubinvest.user.UserValidateTokenRequest\x1a).hubinvest.user.UserValidateTokenResponse\x12P\n\tUserLogin\x12 .hubinvest.user.UserLoginRequest\x1a!.hubinvest.user.UserLoginResponse\x12Y\n\x0cRegisterUser\x12#.hubinvest.user.RegisterUserRequest\x1a$.hubinvest.user.RegisterUserResponse\x12_\n\x0eGetUserProfile\x12%.hubinvest.user.GetUserProfileRequest\x1a&.hubinvest.user.GetUserProfileResponse\x12V\n\x0bHealthCheck\x12\".hubinvest.user.HealthCheckRequest\x1a#.hubinvest.user.HealthCheckResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hubinvest.user_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _USERVALIDATETOKENREQUEST._serialized_start=40
  _USERVALIDATETOKENREQUEST._serialized_end=81
  _USERVALIDATETOKENRESPONSE._serialized_start=83
  _USERVALIDATETOKENRESPONSE._serialized_end=180
  _USERLOGINREQUEST._serialized_start=182
  _USERLOGINREQUEST._serialized_end=233
  _USERLOGINRESPONSE._serialized_start=235
  _USERLOGINRESPONSE._serialized_end=341
  _REGISTERUSERREQUEST._serialized_start=343
  _REGISTERUSERREQUEST._serialized_end=436
  _REGISTERUSERRESPONSE._serialized_start=438
  _REGISTERUSERRESPONSE._serialized_end=517
  _GETUSERPROFILEREQUEST._serialized_start=519
  _GETUSERPROFILEREQUEST._serialized_end=559
  _GETUSERPROFILERESPONSE._serialized_start=562
  _GETUSERPROFILERESPONSE._serialized_end=740
  _HEALTHCHECKREQUEST._serialized_start=742
  _HEALTHCHECKREQUEST._serialized_end=762
  _HEALTHCHECKRESPONSE._serialized_start=764
  _HEALTHCHECKRESPONSE._serialized_end=819
  _USERSERVICE._serialized_start=822
  _USERSERVICE._serialized_end=1299
# @@protoc_insertion_point(module_scope)
