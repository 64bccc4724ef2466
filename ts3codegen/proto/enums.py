"""Closed sets of numeric protocol codes.

Every enum travels on the wire as the decimal text of its unsigned 32-bit
code.
"""

from enum import IntEnum


class ProtocolEnum(IntEnum):
    """Base class for protocol code enums."""

    def __str__(self) -> str:
        return self.name


class TextMessageTargetMode(ProtocolEnum):
    Unknown = 0
    Client = 1
    Channel = 2
    Server = 3


class HostMessageMode(ProtocolEnum):
    NoMessage = 0
    Log = 1
    Modal = 2
    ModalQuit = 3


class HostBannerMode(ProtocolEnum):
    NoAdjust = 0
    AdjustIgnoreAspect = 1
    AdjustKeepAspect = 2


class Codec(ProtocolEnum):
    """Voice codec of a channel."""

    SpeexNarrowband = 0
    SpeexWideband = 1
    SpeexUltraWideband = 2
    CeltMono = 3
    OpusVoice = 4
    OpusMusic = 5


class CodecEncryptionMode(ProtocolEnum):
    PerChannel = 0
    ForcedOff = 1
    ForcedOn = 2


class MoveReason(ProtocolEnum):
    """Why a client appeared in, left or moved between channels."""

    NoReason = 0
    Moved = 1
    Subscription = 2
    LostConnection = 3
    KickChannel = 4
    KickServer = 5
    KickServerBan = 6
    ServerStop = 7
    ClientDisconnect = 8
    ChannelUpdate = 9
    ChannelEdit = 10
    ClientDisconnectServerShutdown = 11


class ClientType(ProtocolEnum):
    Normal = 0
    Query = 1


class GroupType(ProtocolEnum):
    Template = 0
    Regular = 1
    Query = 2


class GroupNamingMode(ProtocolEnum):
    NoName = 0
    Before = 1
    After = 2


class LicenseType(ProtocolEnum):
    NoLicense = 0
    Athp = 1
    Offline = 2
    Npl = 3


class PermissionType(ProtocolEnum):
    """Which kind of holder a permission is assigned to."""

    ServerGroup = 0
    GlobalClient = 1
    Channel = 2
    ChannelGroup = 3
    ChannelClient = 4


class ErrorCode(ProtocolEnum):
    """Result codes carried by ``error`` answers."""

    Ok = 0x0
    Undefined = 0x1
    NotImplemented = 0x2
    OkNoUpdate = 0x3
    DontNotify = 0x4
    LibTimeLimitReached = 0x5
    CommandNotFound = 0x100
    UnableToBindNetworkPort = 0x101
    NoNetworkPortAvailable = 0x102
    ClientInvalidId = 0x200
    ClientNicknameInuse = 0x201
    ClientProtocolLimitReached = 0x203
    ClientInvalidType = 0x204
    ClientAlreadySubscribed = 0x205
    ClientNotLoggedIn = 0x206
    ClientCouldNotValidateIdentity = 0x207
    ChannelInvalidId = 0x300
    ChannelNameInuse = 0x303
    ServerInvalidId = 0x400
    ServerRunning = 0x401
    ParameterQuote = 0x600
    ParameterInvalidCount = 0x601
    ParameterInvalid = 0x602
    ParameterNotFound = 0x603
    ParameterConvert = 0x604
    ParameterInvalidSize = 0x605
    ParameterMissing = 0x606
    PermissionInvalidGroupId = 0xA00
    PermissionDuplicateEntry = 0xA01
    PermissionInvalidPermId = 0xA02
    PermissionNotSet = 0xA03
    PermissionsClientInsufficient = 0xA08


PROTOCOL_ENUMS: dict[str, type[ProtocolEnum]] = {
    cls.__name__: cls
    for cls in (
        TextMessageTargetMode,
        HostMessageMode,
        HostBannerMode,
        Codec,
        CodecEncryptionMode,
        MoveReason,
        ClientType,
        GroupType,
        GroupNamingMode,
        LicenseType,
        PermissionType,
        ErrorCode,
    )
}
