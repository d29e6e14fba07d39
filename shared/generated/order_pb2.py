# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hubinvest/order.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as hubinvest_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x15hubinvest/order.proto\x12\x0fhubinvest.order\x1a\x16hubinvest/common.proto\"\x8d\x01\n\x12SubmitOrderRequest\x12\x0f\n\x07user_id\x18\x01 \x01(\t\x12\x0e\n\x06symbol\x18\x02 \x01(\t\x12\x12\n\norder_type\x18\x03 \x01(\t\x12\x12\n\norder_side\x18\x04 \x01(\t\x12\x10\n\x08quantity\x18\x05 \x01(\x01\x12\x12\n\x05price\x18\x06 \x01(\x01H\x00\x88\x01\x01\x42\x08\n\x06_price\"\xe0\x01\n\x13SubmitOrderResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x10\n\x08order_id\x18\x02 \x01(\t\x12\x0e\n\x06status\x18\x03 \x01(\t\x12\x14\n\x0csubmitted_at\x18\x04 \x01(\t\x12\x1c\n\x0f\x65stimated_price\x18\x05 \x01(\x01H\x00\x88\x01\x01\x12\x19\n\x0cmarket_price\x18\x06 \x01(\x01H\x01\x88\x01\x01\x42\x12\n\x10_estimated_priceB\x0f\n\r_market_price\"\xea\x01\n\x0cOrderDetails\x12\x10\n\x08order_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\x12\x0e\n\x06symbol\x18\x03 \x01(\t\x12\x12\n\norder_type\x18\x04 \x01(\t\x12\x12\n\norder_side\x18\x05 \x01(\t\x12\x10\n\x08quantity\x18\x06 \x01(\x01\x12\x12\n\x05price\x18\x07 \x01(\x01H\x00\x88\x01\x01\x12\x0e\n\x06status\x18\x08 \x01(\t\x12\x12\n\ncreated_at\x18\t \x01(\t\x12\x12\n\nupdated_at\x18\n \x01(\t\x12\x17\n\x0f\x65stimated_value\x18\x0b \x01(\x01\x42\x08\n\x06_price\";\n\x16GetOrderDetailsRequest\x12\x10\n\x08order_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\"|\n\x17GetOrderDetailsResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12,\n\x05order\x18\x02 \x01(\x0b\x32\x1d.hubinvest.order.OrderDetails\":\n\x15GetOrderStatusRequest\x12\x10\n\x08order_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\"\x9b\x01\n\x16GetOrderStatusResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x10\n\x08order_id\x18\x02 \x01(\t\x12\x0e\n\x06status\x18\x03 \x01(\t\x12\x16\n\x0estatus_message\x18\x04 \x01(\t\x12\x12\n\nupdated_at\x18\x05 \x01(\t\"7\n\x12\x43\x61ncelOrderRequest\x12\x10\n\x08order_id\x18\x01 \x01(\t\x12\x0f\n\x07user_id\x18\x02 \x01(\t\"\x82\x01\n\x13\x43\x61ncelOrderResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x10\n\x08order_id\x18\x02 \x01(\t\x12\x0e\n\x06status\x18\x03 \x01(\t\x12\x14\n\x0c\x63\x61ncelled_at\x18\x04 \x01(\t2\x8b\x03\n\x0cOrderService\x12X\n\x0bSubmitOrder\x12#.hubinvest.order.SubmitOrderRequest\x1a$.hubinvest.order.SubmitOrderResponse\x12\x64\n\x0fGetOrderDetails\x12\'.hubinvest.order.GetOrderDetailsRequest\x1a(.hubinvest.order.GetOrderDetailsResponse\x12\x61\n\x0eGetOrderStatus\x12&.hubinvest.order.GetOrderStatusRequest\x1a\'.hubinvest.order.GetOrderStatusResponse\x12X\n\x0b\x43\x61ncelOrder\x12#.hubinvest.order.CancelOrderRequest\x1a$.hubinvest.order.CancelOrderResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hubinvest.order_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _SUBMITORDERREQUEST._serialized_start=67
  _SUBMITORDERREQUEST._serialized_end=208
  _SUBMITORDERRESPONSE._serialized_start=211
  _SUBMITORDERRESPONSE._serialized_end=435
  _ORDERDETAILS._serialized_start=438
  _ORDERDETAILS._serialized_end=672
  _GETORDERDETAILSREQUEST._serialized_start=674
  _GETORDERDETAILSREQUEST._serialized_end=733
  _GETORDERDETAILSRESPONSE._serialized_start=735
  _GETORDERDETAILSRESPONSE._serialized_end=859
  _GETORDERSTATUSREQUEST._serialized_start=861
  _GETORDERSTATUSREQUEST._serialized_end=919
  _GETORDERSTATUSRESPONSE._serialized_start=922
  _GETORDERSTATUSRESPONSE._serialized_end=1077
  _CANCELORDERREQUEST._serialized_start=1079
  _CANCELORDERREQUEST._serialized_end=1134
  _CANCELORDERRESPONSE._serialized_start=1137
  _CANCELORDERRESPONSE._serialized_end=1267
  _ORDERSERVICE._serialized_start=1270
  _ORDERSERVICE._serialized_end=1665
# @@protoc_insertion_point(module_scope)
