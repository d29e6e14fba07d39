# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: hubinvest/market_data.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from . import common_pb2 as hubinvest_dot_common__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1bhubinvest/market_data.proto\x12\x15hubinvest.market_data\x1a\x16hubinvest/common.proto\"q\n\nMarketData\x12\x0e\n\x06symbol\x18\x01 \x01(\t\x12\x14\n\x0c\x63ompany_name\x18\x02 \x01(\t\x12\x15\n\rcurrent_price\x18\x03 \x01(\x01\x12\x10\n\x08\x63\x61tegory\x18\x04 \x01(\x05\x12\x14\n\x0clast_updated\x18\x05 \x01(\t\"&\n\x14GetMarketDataRequest\x12\x0e\n\x06symbol\x18\x01 \x01(\t\"\x84\x01\n\x15GetMarketDataResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x36\n\x0bmarket_data\x18\x02 \x01(\x0b\x32!.hubinvest.market_data.MarketData\",\n\x19GetBatchMarketDataRequest\x12\x0f\n\x07symbols\x18\x01 \x03(\t\"\x89\x01\n\x1aGetBatchMarketDataResponse\x12\x33\n\x0c\x61pi_response\x18\x01 \x01(\x0b\x32\x1d.hubinvest.common.APIResponse\x12\x36\n\x0bmarket_data\x18\x02 \x03(\x0b\x32!.hubinvest.market_data.MarketData2\xfa\x01\n\x11MarketDataService\x12j\n\rGetMarketData\x12+.hubinvest.market_data.GetMarketDataRequest\x1a,.hubinvest.market_data.GetMarketDataResponse\x12y\n\x12GetBatchMarketData\x12\x30.hubinvest.market_data.GetBatchMarketDataRequest\x1a\x31.hubinvest.market_data.GetBatchMarketDataResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'hubinvest.market_data_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _MARKETDATA._serialized_start=78
  _MARKETDATA._serialized_end=191
  _GETMARKETDATAREQUEST._serialized_start=193
  _GETMARKETDATAREQUEST._serialized_end=231
  _GETMARKETDATARESPONSE._serialized_start=234
  _GETMARKETDATARESPONSE._serialized_end=366
  _GETBATCHMARKETDATAREQUEST._serialized_start=368
  _GETBATCHMARKETDATAREQUEST._serialized_end=412
  _GETBATCHMARKETDATARESPONSE._serialized_start=415
  _GETBATCHMARKETDATARESPONSE._serialized_end=552
  _MARKETDATASERVICE._serialized_start=555
  _MARKETDATASERVICE._serialized_end=805
# @@protoc_insertion_point(module_scope)
