import json
import logging
from pathlib import Path

from portal_cli.device import IpAddressInfo, IpConfiguration, NetworkAdapterInfo


class PortalCliInvalidIpConfigurationException(Exception):
    pass


def _parse_ip_address(ip_address) -> IpAddressInfo:
    address = ip_address['IpAddress']
    if not isinstance(address, str):
        raise TypeError(f'IpAddress must be a string, got {address!r}')
    return IpAddressInfo(address=address, subnet_mask=ip_address.get('Mask'))


def _parse_adapter(adapter) -> NetworkAdapterInfo:
    return NetworkAdapterInfo(
        name=adapter.get('Name', ''),
        ip_addresses=[_parse_ip_address(ip_address) for ip_address in adapter.get('IpAddresses', [])],
        description=adapter.get('Description', ''),
        hardware_address=adapter.get('HardwareAddress', ''),
        index=int(adapter.get('Index', 0)),
        type=adapter.get('Type', ''),
    )


def load_ip_configuration(path: Path) -> IpConfiguration:
    """
    Load an ipconfig snapshot, as returned by the device's /api/networking/ipconfig endpoint and saved to a file.
    """
    try:
        with open(path, encoding='utf-8') as ip_config_file:
            document = json.load(ip_config_file)
    except (OSError, ValueError) as e:
        raise PortalCliInvalidIpConfigurationException(f'Failed reading {path}: {e}')

    try:
        adapters = [_parse_adapter(adapter) for adapter in document['Adapters']]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise PortalCliInvalidIpConfigurationException(f'Malformed ip configuration in {path}: {e!r}')

    logging.debug(f'Loaded {len(adapters)} adapters from {path}')
    return IpConfiguration(adapters=adapters)
