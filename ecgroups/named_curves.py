"""
SEC 2 / NIST standard curve parameters.

Each curve is a CurveParameters record. Groups are built on first request
and shared, so every caller asking for "secp256k1" gets the same Group
object (point equality depends on group identity).
"""

import logging
import threading

from .errors import UnknownCurveError
from .group import CurveParameters, Group

logger = logging.getLogger(__name__)


# p = (2**128 - 3) / 76439
SECP112R1 = CurveParameters(
    name="secp112r1",
    p=4451685225093714772084598273548427,
    a=4451685225093714772084598273548424,
    b=2061118396808653202902996166388514,
    g=(188281465057972534892223778713752,
       3419875491033170827167861896082688),
    n=4451685225093714776491891542548933,
    h=1,
)

SECP160R1 = CurveParameters(
    name="secp160r1",
    p=0xffffffffffffffffffffffffffffffff7fffffff,
    a=0xffffffffffffffffffffffffffffffff7ffffffc,
    b=0x1c97befc54bd7a8b65acf89f81d4d4adc565fa45,
    g=(0x4a96b5688ef573284664698968c38bb913cbfc82,
       0x23a628553168947d59dcc912042351377ac5fb32),
    n=0x0100000000000000000001f4c8f927aed3ca752257,
    h=1,
)

SECP160R2 = CurveParameters(
    name="secp160r2",
    p=0xfffffffffffffffffffffffffffffffeffffac73,
    a=0xfffffffffffffffffffffffffffffffeffffac70,
    b=0xb4e134d3fb59eb8bab57274904664d5af50388ba,
    g=(0x52dcb034293a117e1f4ff11b30f7199d3144ce6d,
       0xfeaffef2e331f296e071fa0df9982cfea7d43f2e),
    n=0x0100000000000000000000351ee786a818f3a1a16b,
    h=1,
)

SECP160K1 = CurveParameters(
    name="secp160k1",
    p=0xfffffffffffffffffffffffffffffffeffffac73,
    a=0x0,
    b=0x7,
    g=(0x3b4c382ce37aa192a4019e763036f4f5dd4d7ebb,
       0x938cf935318fdced6bc28286531733c3f03c4fee),
    n=0x100000000000000000001b8fa16dfab9aca16b6b3,
    h=1,
)

SECP192K1 = CurveParameters(
    name="secp192k1",
    p=0xfffffffffffffffffffffffffffffffffffffffeffffee37,
    a=0x0,
    b=0x3,
    g=(0xdb4ff10ec057e9ae26b07d0280b7f4341da5d1b1eae06c7d,
       0x9b2f2f6d9c5628a7844163d015be86344082aa88d95e2f9d),
    n=0xfffffffffffffffffffffffe26f2fc170f69466a74defd8d,
    h=1,
)

SECP192R1 = CurveParameters(
    name="secp192r1",
    p=0xfffffffffffffffffffffffffffffffeffffffffffffffff,
    a=0xfffffffffffffffffffffffffffffffefffffffffffffffc,
    b=0x64210519e59c80e70fa7e9ab72243049feb8deecc146b9b1,
    g=(0x188da80eb03090f67cbf20eb43a18800f4ff0afd82ff1012,
       0x07192b95ffc8da78631011ed6b24cdd573f977a11e794811),
    n=0xffffffffffffffffffffffff99def836146bc9b1b4d22831,
    h=1,
)

SECP224K1 = CurveParameters(
    name="secp224k1",
    p=0xfffffffffffffffffffffffffffffffffffffffffffffffeffffe56d,
    a=0x0,
    b=0x5,
    g=(0xa1455b334df099df30fc28a169a467e9e47075a90f7e650eb6b7a45c,
       0x7e089fed7fba344282cafbd6f7e319f7c0b0bd59e2ca4bdb556d61a5),
    n=0x010000000000000000000000000001dce8d2ec6184caf0a971769fb1f7,
    h=1,
)

SECP224R1 = CurveParameters(
    name="secp224r1",
    p=0xffffffffffffffffffffffffffffffff000000000000000000000001,
    a=0xfffffffffffffffffffffffffffffffefffffffffffffffffffffffe,
    b=0xb4050a850c04b3abf54132565044b0b7d7bfd8ba270b39432355ffb4,
    g=(0xb70e0cbd6bb4bf7f321390b94a03c1d356c21122343280d6115c1d21,
       0xbd376388b5f723fb4c22dfe6cd4375a05a07476444d5819985007e34),
    n=0xffffffffffffffffffffffffffff16a2e0b8f03e13dd29455c5c2a3d,
    h=1,
)

SECP256K1 = CurveParameters(
    name="secp256k1",
    p=0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f,
    a=0,
    b=7,
    g=(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
       0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8),
    n=0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141,
    h=1,
)

# P-256 parameters
SECP256R1 = CurveParameters(
    name="secp256r1",
    p=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
    a=0xffffffff00000001000000000000000000000000fffffffffffffffffffffffc,
    b=0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
    g=(0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
       0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5),
    n=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
    h=1,
)

SECP384R1 = CurveParameters(
    name="secp384r1",
    p=0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffff0000000000000000ffffffff,
    a=0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffff0000000000000000fffffffc,
    b=0xb3312fa7e23ee7e4988e056be3f82d19181d9c6efe8141120314088f5013875ac656398d8a2ed19d2a85c8edd3ec2aef,
    g=(0xaa87ca22be8b05378eb1c71ef320ad746e1d3b628ba79b9859f741e082542a385502f25dbf55296c3a545e3872760ab7,
       0x3617de4a96262c6f5d9e98bf9292dc29f8f41dbd289a147ce9da3113b5f0b8c00a60b1ce1d7e819d7a431d7c90ea0e5f),
    n=0xffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf581a0db248b0a77aecec196accc52973,
    h=1,
)

SECP521R1 = CurveParameters(
    name="secp521r1",
    p=0x01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff,
    a=0x01fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffc,
    b=0x0051953eb9618e1c9a1f929a21a0b68540eea2da725b99b315f3b8b489918ef109e156193951ec7e937b1652c0bd3bb1bf073573df883d2c34f1ef451fd46b503f00,
    g=(0x00c6858e06b70404e9cd9e3ecb662395b4429c648139053fb521f828af606b4d3dbaa14b5e77efe75928fe1dc127a2ffa8de3348b3c1856a429bf97e7e31c2e5bd66,
       0x011839296a789a3bc0045c8a5fb42c7d1bd998f54449579b446817afbd17273e662c97ee72995ef42640c550b9013fad0761353c7086a272c24088be94769fd16650),
    n=0x01fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409,
    h=1,
)


CURVE_PARAMETERS = {
    params.name: params
    for params in (
        SECP112R1, SECP160K1, SECP160R1, SECP160R2,
        SECP192K1, SECP192R1, SECP224K1, SECP224R1,
        SECP256K1, SECP256R1, SECP384R1, SECP521R1,
    )
}

# NIST names for the SEC 2 random curves.
ALIASES = {
    "nistp192": "secp192r1",
    "nistp224": "secp224r1",
    "nistp256": "secp256r1",
    "nistp384": "secp384r1",
    "nistp521": "secp521r1",
    "p-192": "secp192r1",
    "p-224": "secp224r1",
    "p-256": "secp256r1",
    "p-384": "secp384r1",
    "p-521": "secp521r1",
}

_groups = {}
_groups_lock = threading.Lock()


def available_curves():
    """Names accepted by get_group, aliases included."""
    return sorted(set(CURVE_PARAMETERS) | set(ALIASES))


def get_group(name):
    """Return the shared Group for a standard curve name (case-insensitive)."""
    if not isinstance(name, str):
        raise UnknownCurveError(name)
    key = name.lower()
    key = ALIASES.get(key, key)
    if key not in CURVE_PARAMETERS:
        raise UnknownCurveError(name)

    group = _groups.get(key)
    if group is None:
        with _groups_lock:
            group = _groups.get(key)
            if group is None:
                group = Group.from_parameters(CURVE_PARAMETERS[key])
                _groups[key] = group
                logger.debug("Loaded standard curve %s", key)
    return group


def __getattr__(attr):
    # Secp256k1, Nistp256, ... resolve to the shared groups.
    lowered = attr.lower()
    if lowered in CURVE_PARAMETERS or lowered in ALIASES:
        return get_group(lowered)
    raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")
