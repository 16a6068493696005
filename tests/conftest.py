import json

import pytest

from portal_cli.device import IpAddressInfo, IpConfiguration, NetworkAdapterInfo


def make_ip_config(*adapters_addresses):
    return IpConfiguration(adapters=[
        NetworkAdapterInfo(name=f'adapter{index}', ip_addresses=[IpAddressInfo(address=address) for address in addresses])
        for index, addresses in enumerate(adapters_addresses)
    ])


@pytest.fixture
def ip_config_file(tmp_path):
    document = {
        'Adapters': [
            {
                'Description': 'Bluetooth Device (Personal Area Network)',
                'HardwareAddress': '00-15-5d-00-01-02',
                'Index': 4,
                'Name': '{2B5D5C5A-0000-0000-0000-000000000001}',
                'Type': 'Ethernet',
                'IpAddresses': [
                    {'IpAddress': '169.254.12.7', 'Mask': '255.255.0.0'},
                    {'IpAddress': '0.0.0.0', 'Mask': '0.0.0.0'},
                ],
            },
            {
                'Description': 'Intel(R) Ethernet Connection',
                'HardwareAddress': '00-15-5d-00-01-03',
                'Index': 7,
                'Name': '{2B5D5C5A-0000-0000-0000-000000000002}',
                'Type': 'Ethernet',
                'IpAddresses': [
                    {'IpAddress': '10.0.0.5', 'Mask': '255.255.255.0'},
                    {'IpAddress': '10.0.0.6', 'Mask': '255.255.255.0'},
                ],
            },
        ],
    }
    path = tmp_path / 'ipconfig.json'
    path.write_text(json.dumps(document), encoding='utf-8')
    return path
