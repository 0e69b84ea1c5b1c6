"""
Protobuf messages of the reporting interface.

Equivalent .proto:

    syntax = "proto3";
    package pvz.v1;
    import "google/protobuf/timestamp.proto";

    service PVZService {
      rpc GetPVZList(GetPVZListRequest) returns (GetPVZListResponse);
    }
    message PVZ {
      string id = 1;
      google.protobuf.Timestamp registration_date = 2;
      string city = 3;
    }
    message GetPVZListRequest {}
    message GetPVZListResponse { repeated PVZ pvzs = 1; }

The descriptor is registered in the default pool at import time, so no
generated *_pb2 module is needed.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory, timestamp_pb2

PACKAGE = 'pvz.v1'
FILE_NAME = 'pvz/v1/pvz.proto'
SERVICE_NAME = f'{PACKAGE}.PVZService'

_Field = descriptor_pb2.FieldDescriptorProto


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name=FILE_NAME,
        package=PACKAGE,
        syntax='proto3',
    )
    proto.dependency.append(timestamp_pb2.DESCRIPTOR.name)

    pvz = proto.message_type.add(name='PVZ')
    pvz.field.add(
        name='id', json_name='id', number=1,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )
    pvz.field.add(
        name='registration_date', json_name='registrationDate', number=2,
        type=_Field.TYPE_MESSAGE, label=_Field.LABEL_OPTIONAL,
        type_name='.google.protobuf.Timestamp',
    )
    pvz.field.add(
        name='city', json_name='city', number=3,
        type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL,
    )

    proto.message_type.add(name='GetPVZListRequest')

    response = proto.message_type.add(name='GetPVZListResponse')
    response.field.add(
        name='pvzs', json_name='pvzs', number=1,
        type=_Field.TYPE_MESSAGE, label=_Field.LABEL_REPEATED,
        type_name=f'.{PACKAGE}.PVZ',
    )

    service = proto.service.add(name='PVZService')
    service.method.add(
        name='GetPVZList',
        input_type=f'.{PACKAGE}.GetPVZListRequest',
        output_type=f'.{PACKAGE}.GetPVZListResponse',
    )
    return proto


def _register(pool: descriptor_pool.DescriptorPool):
    try:
        return pool.FindFileByName(FILE_NAME)
    except KeyError:
        pool.AddSerializedFile(_build_file_descriptor().SerializeToString())
        return pool.FindFileByName(FILE_NAME)


_pool = descriptor_pool.Default()
FILE_DESCRIPTOR = _register(_pool)


def _message_class(name: str):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f'{PACKAGE}.{name}'))


PVZ = _message_class('PVZ')
GetPVZListRequest = _message_class('GetPVZListRequest')
GetPVZListResponse = _message_class('GetPVZListResponse')
