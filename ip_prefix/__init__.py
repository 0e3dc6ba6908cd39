from .errors import ArityError, GroupParseError, NetmaskContiguityError, RangeError, ValidationError
from .family import AddressFamily
from .prefix import Prefix
from .prefix32 import IPV4
from .prefix128 import IPV6

FAMILIES = {IPV4.name: IPV4, IPV6.name: IPV6}
