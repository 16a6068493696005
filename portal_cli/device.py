from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OperatingSystemInformation:
    computer_name: str
    language: str
    os_edition: str
    os_edition_id: int
    os_version: str
    platform: str


@dataclass
class IpAddressInfo:
    address: str
    subnet_mask: Optional[str] = None


@dataclass
class NetworkAdapterInfo:
    name: str
    ip_addresses: List[IpAddressInfo] = field(default_factory=list)
    description: str = ''
    hardware_address: str = ''
    index: int = 0
    type: str = ''


@dataclass
class IpConfiguration:
    adapters: List[NetworkAdapterInfo] = field(default_factory=list)
