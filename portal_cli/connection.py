import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from requests.auth import HTTPBasicAuth
from urllib3.util import Url, parse_url

from portal_cli import config
from portal_cli.device import IpConfiguration, OperatingSystemInformation


class PortalCliUnsupportedOperationException(NotImplementedError):
    pass


@dataclass(frozen=True)
class Credentials:
    user_name: str
    password: str = field(repr=False)

    def to_requests_auth(self) -> Optional[HTTPBasicAuth]:
        """
        Blank credentials mean the device accepts unauthenticated requests, in which case there's nothing to hand
        over to requests.
        """
        if not self.user_name:
            return None
        return HTTPBasicAuth(self.user_name, self.password or '')


def is_selectable_address(address: str) -> bool:
    return address != config.unspecified_address and not address.startswith(config.link_local_prefix)


def build_connection_uri(authority: str) -> Url:
    return parse_url(f'{config.connection_scheme}://{authority}')


class PortalConnection(ABC):
    """
    What the HTTP client expects from a connection: where to connect, how to authenticate, and how to keep the
    target address current once the device reports its network configuration.
    """

    def __init__(self, connection: Url, credentials: Credentials):
        self._connection = connection
        self._credentials = credentials
        self.family: Optional[str] = None
        self.name: Optional[str] = None
        self.os_info: Optional[OperatingSystemInformation] = None

    @property
    def connection(self) -> Url:
        return self._connection

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @abstractmethod
    def get_device_certificate_data(self) -> bytes:
        pass

    @abstractmethod
    def set_device_certificate(self, certificate_data: bytes) -> None:
        pass

    @abstractmethod
    def refresh_connection(self, requires_https: bool = False) -> None:
        pass

    @abstractmethod
    def refresh_connection_from_ip_config(self, ip_config: IpConfiguration, requires_https: bool = False) -> None:
        pass


class DevicePortalConnection(PortalConnection):
    """
    A connection to a device without certificate support.

    The scheme is always http, even when ``requires_https`` is set.
    """

    CERTIFICATES_NOT_SUPPORTED_MESSAGE = 'Device certificates are not supported by this connection'

    def __init__(self, address: Optional[str], user_name: str, password: str):
        if not address or address.isspace():
            logging.debug(f'No address given, using {config.default_address}')
            address = config.default_address

        super().__init__(build_connection_uri(address), Credentials(user_name=user_name, password=password))

    def get_device_certificate_data(self) -> bytes:
        raise PortalCliUnsupportedOperationException(self.CERTIFICATES_NOT_SUPPORTED_MESSAGE)

    def set_device_certificate(self, certificate_data: bytes) -> None:
        raise PortalCliUnsupportedOperationException(self.CERTIFICATES_NOT_SUPPORTED_MESSAGE)

    @staticmethod
    def _log_ignored_https_requirement(requires_https: bool) -> None:
        if requires_https:
            logging.debug(f'HTTPS was requested, but {config.connection_scheme} is used')

    def refresh_connection(self, requires_https: bool = False) -> None:
        self._log_ignored_https_requirement(requires_https)
        self._connection = build_connection_uri(self._connection.netloc)

    def refresh_connection_from_ip_config(self, ip_config: IpConfiguration, requires_https: bool = False) -> None:
        self._log_ignored_https_requirement(requires_https)

        for adapter in ip_config.adapters:
            for address_info in adapter.ip_addresses:
                if not is_selectable_address(address_info.address):
                    logging.debug(f'Skipping address {address_info.address} of adapter {adapter.name}')
                    continue

                logging.debug(f'Selected address {address_info.address} of adapter {adapter.name}')
                self._connection = build_connection_uri(address_info.address)
                return

        logging.debug(f'No selectable address found, keeping {self._connection.url}')
