import argparse
import logging
import sys
from pathlib import Path

from prettytable import PrettyTable

from portal_cli.connection import DevicePortalConnection, build_connection_uri, is_selectable_address
from portal_cli.ip_config import load_ip_configuration


class PortalCli:
    def __init__(self, address, user, password) -> None:
        self._connection = DevicePortalConnection(address, user, password)

    def show(self, args):
        if args.name:
            self._connection.name = args.name
        if args.family:
            self._connection.family = args.family

        credentials = self._connection.credentials

        table = PrettyTable()
        table.field_names = ['Connection', 'User', 'Authenticated', 'Device name', 'Family']
        table.add_row([self._connection.connection.url,
                       credentials.user_name or '',
                       'yes' if credentials.to_requests_auth() else 'no',
                       self._connection.name or '',
                       self._connection.family or ''])
        print(table)

    def refresh(self, args):
        original_connection = self._connection.connection.url
        self._connection.refresh_connection(requires_https=args.https)
        print(f'Connection: {original_connection} -> {self._connection.connection.url}')

    def resolve(self, args):
        ip_config = load_ip_configuration(args.ipconfig)

        original_connection = self._connection.connection
        self._connection.refresh_connection_from_ip_config(ip_config, requires_https=args.https)

        if self._connection.connection == original_connection:
            print(f'Connection unchanged: {original_connection.url}')
        else:
            print(f'Connection: {original_connection.url} -> {self._connection.connection.url}')

    def adapters(self, args):
        ip_config = load_ip_configuration(args.ipconfig)

        self._connection.refresh_connection_from_ip_config(ip_config)
        selected_connection = self._connection.connection

        table = PrettyTable()
        table.field_names = ['Adapter', 'Description', 'Address', 'Mask', 'Selectable', 'Selected']
        selected_found = False
        for adapter in ip_config.adapters:
            for address_info in adapter.ip_addresses:
                selectable = is_selectable_address(address_info.address)
                selected = selectable and not selected_found and \
                    build_connection_uri(address_info.address) == selected_connection
                selected_found = selected_found or selected
                table.add_row([adapter.name,
                               adapter.description,
                               address_info.address,
                               address_info.subnet_mask or '',
                               'yes' if selectable else 'no',
                               '*' if selected else ''])

        if table.rows:
            print(table)
        else:
            print('No addresses')


def _parse_args(argv=None):
    main_parser = argparse.ArgumentParser(epilog='For more information about a given command, use "<command> -h"')

    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose mode')

    connection_parser = argparse.ArgumentParser(add_help=False)
    connection_parser.add_argument('--address', help='Device address (host[:port]). Defaults to localhost:10080')
    connection_parser.add_argument('--user', default='', help='User name. Omit for unauthenticated access')
    connection_parser.add_argument('--password', default='', help='Password')

    subparsers = main_parser.add_subparsers()

    subparser = subparsers.add_parser('show', parents=[common_parser, connection_parser],
                                      help='Show the connection and credentials in use')
    subparser.set_defaults(func=PortalCli.show)
    subparser.add_argument('--name', help='Device name')
    subparser.add_argument('--family', help='Device operating system family')

    subparser = subparsers.add_parser('refresh', parents=[common_parser, connection_parser],
                                      help='Rebuild the connection from its current address')
    subparser.set_defaults(func=PortalCli.refresh)
    subparser.add_argument('--https', action='store_true', help='Require a secure connection (currently ignored)')

    subparser = subparsers.add_parser('resolve', parents=[common_parser, connection_parser],
                                      help='Select the connection address from an ipconfig snapshot')
    subparser.set_defaults(func=PortalCli.resolve)
    subparser.add_argument('--ipconfig', required=True, type=Path, help='Path to an ipconfig JSON snapshot')
    subparser.add_argument('--https', action='store_true', help='Require a secure connection (currently ignored)')

    subparser = subparsers.add_parser('adapters', parents=[common_parser, connection_parser],
                                      help='List the addresses in an ipconfig snapshot')
    subparser.set_defaults(func=PortalCli.adapters)
    subparser.add_argument('--ipconfig', required=True, type=Path, help='Path to an ipconfig JSON snapshot')

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        main_parser.print_help()
        sys.exit(0)

    return main_parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    cli = PortalCli(args.address, args.user, args.password)
    args.func(cli, args)


if __name__ == '__main__':
    main()
