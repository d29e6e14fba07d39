# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hubinvest/position.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as hubinvest_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x18hubinvest/position.proto\x12\x12hubinvest.position\x1a\x16hubinvest/common.proto\"\xb3\x02\n\x08Position\x12\x13\n\x0bposition_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x0e\n\x06symbol\x18\x03 \x01(\t\x12\x10\n\x08quantity\x18\x04 \x01(\x01\x12\x15\n\raverage_price\x18\x05 \x01(\x01\x12\x18\n\x10total_investment\x18\x06 \x01(\x01\x12\x15\n\rcurrent_price\x18\x07 \x01(\x01\x12\x14\n\x0cmarket_value\x18\x08 \x01(\x01\x12\x16\n\x0eunrealized_pnl\x18\t \x01(\x01\x12\x1a\n\x12unrealized_pnl_pct\x18\n \x01(\x01\x12\x15\n\rposition_type\x18\x0b \x01(\t\x12\x0e\n\x06status\x18\x0c \x01(\t\x12\x12\n\ncreated_at\x18\r \x01(\t\x12\x12\n\nupdated_at\x18\x0e \x01(\t\"\xdc\x01\n\x13\x43\x61tegoryAggregation\x12\x13\n\x0b\x63\x61tegory_id\x18\x01 \x01(\x05\x12\x15\n\rcategory_name\x18\x02 \x01(\t\x12\x16\n\x0etotal_invested\x18\x03 \x01(\x01\x12\x1b\n\x13total_current_value\x18\x04 \x01(\x01\x12\x1c\n\x14total_unrealized_pnl\x18\x05 \x01(\x01\x12\x1a\n\x12unrealized_pnl_pct\x18\x06 \x01(\x01\x12\x16\n\x0eposition_count\x18\x07 \x01(\x05\x12\x12\n\nweight_pct\x18\x08 \x01(\x01\"\xab\x02\n\x13PositionAggregation\x12\x16\n\x0etotal_invested\x18\x01 \x01(\x01\x12\x1b\n\x13total_current_value\x18\x02 \x01(\x01\x12\x1c\n\x14total_unrealized_pnl\x18\x03 \x01(\x01\x12 \n\x18total_unrealized_pnl_pct\x18\x04 \x01(\x01\x12\x17\n\x0ftotal_positions\x18\x05 \x01(\x05\x12\x18\n\x10\x61\x63tive_positions\x18\x06 \x01(\x05\x12;\n\ncategories\x18\x07 \x03(\x0b\x32\'.hubinvest.position.CategoryAggregation\x12/\n\tpositions\x18\x08 \x03(\x0b\x32\x1c.hubinvest.position.Position\"&\n\x13GetPositionsRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\"|\n\x14GetPositionsResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12/\n\tpositions\x18\x02 \x03(\x0b\x32\x1c.hubinvest.position.Position\"0\n\x1dGetPositionAggregationRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\"\x93\x01\n\x1eGetPositionAggregationResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12<\n\x0b\x61ggregation\x18\x02 \x01(\x0b\x32\'.hubinvest.position.PositionAggregation\"p\n\x15\x43reatePositionRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x0e\n\x06symbol\x18\x02 \x01(\t\x12\x10\n\x08quantity\x18\x03 \x01(\x01\x12\r\n\x05price\x18\x04 \x01(\x01\x12\x15\n\rposition_type\x18\x05 \x01(\t\"}\n\x16\x43reatePositionResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12.\n\x08position\x18\x02 \x01(\x0b\x32\x1c.hubinvest.position.Position\"^\n\x15UpdatePositionRequest\x12\x13\n\x0bposition_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x10\n\x08quantity\x18\x03 \x01(\x01\x12\r\n\x05price\x18\x04 \x01(\x01\"}\n\x16UpdatePositionResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12.\n\x08position\x18\x02 \x01(\x0b\x32\x1c.hubinvest.position.Position2\xc7\x03\n\x0fPositionService\x12\x61\n\x0cGetPositions\x12\'.hubinvest.position.GetPositionsRequest\x1a(.hubinvest.position.GetPositionsResponse\x12\x7f\n\x16GetPositionAggregation\x12\x31.hubinvest.position.GetPositionAggregationRequest\x1a\x32.hubinvest.position.GetPositionAggregationResponse\x12g\n\x0e\x43reatePosition\x12).hubinvest.position.CreatePositionRequest\x1a*.hubinvest.position.CreatePositionResponse\x12g\n\x0eUpdatePosition\x12).hubinvest.position.UpdatePositionRequest\x1a*.hubinvest.position.UpdatePositionResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hubinvest.position_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _POSITION._serialized_start=73
  _POSITION._serialized_end=380
  _CATEGORYAGGREGATION._serialized_start=383
  _CATEGORYAGGREGATION._serialized_end=603
  _POSITIONAGGREGATION._serialized_start=606
  _POSITIONAGGREGATION._serialized_end=905
  _GETPOSITIONSREQUEST._serialized_start=907
  _GETPOSITIONSREQUEST._serialized_end=945
  _GETPOSITIONSRESPONSE._serialized_start=947
  _GETPOSITIONSRESPONSE._serialized_end=1071
  _GETPOSITIONAGGREGATIONREQUEST._serialized_start=1073
  _GETPOSITIONAGGREGATIONREQUEST._serialized_end=1121
  _GETPOSITIONAGGREGATIONRESPONSE._serialized_start=1124
  _GETPOSITIONAGGREGATIONRESPONSE._serialized_end=1271
  _CREATEPOSITIONREQUEST._serialized_start=1273
  _CREATEPOSITIONREQUEST._serialized_end=1385
  _CREATEPOSITIONRESPONSE._serialized_start=1387
  _CREATEPOSITIONRESPONSE._serialized_end=1512
  _UPDATEPOSITIONREQUEST._serialized_start=1514
  _UPDATEPOSITIONREQUEST._serialized_end=1608
  _UPDATEPOSITIONRESPONSE._serialized_start=1610
  _UPDATEPOSITIONRESPONSE._serialized_end=1735
  _POSITIONSERVICE._serialized_start=1738
  _POSITIONSERVICE._serialized_end=2193
# @@protoc_insertion_point(module_scope)
