# src/chainlens/cli/cli.py
import argparse
import json
import sys
from typing import Dict, List, Optional

import uvicorn

from ..analytics.service import AnalyticsQueryService
from ..api.envelope import execute
from ..api.server import create_app
from ..config.settings import DEFAULT_CONFIG_PATH, ServiceConfig
from ..explorer.service import BlockchainQueryService
from ..monitoring.logging_config import LogConfig


class CLI:
    def __init__(self):
        self.services = {
            'blockchain': BlockchainQueryService(),
            'analytics': AnalyticsQueryService(),
        }

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        return args.func(args)

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='chainlens CLI')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        # Server commands
        serve = subparsers.add_parser('serve', help='Run the HTTP API')
        serve.add_argument('--config', default=DEFAULT_CONFIG_PATH, help='YAML settings file')
        serve.add_argument('--host', help='Bind address (overrides config)')
        serve.add_argument('--port', type=int, help='Bind port (overrides config)')
        serve.set_defaults(func=self.serve)

        # Query commands
        query = subparsers.add_parser('query', help='Run one query and print the JSON response')
        query.add_argument('service', choices=sorted(self.services), help='Query service')
        query.add_argument(
            '--param', '-p', action='append', default=[], metavar='KEY=VALUE',
            help='Query parameter, e.g. -p type=latest -p limit=5'
        )
        query.set_defaults(func=self.run_query)

        return parser

    @staticmethod
    def parse_params(pairs: List[str]) -> Dict[str, str]:
        params = {}
        for pair in pairs:
            key, sep, value = pair.partition('=')
            if not sep or not key:
                raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{pair}'")
            params.setdefault(key, value)
        return params

    def run_query(self, args) -> int:
        try:
            params = self.parse_params(args.param)
        except argparse.ArgumentTypeError as e:
            print(str(e), file=sys.stderr)
            return 2

        service = self.services[args.service]
        query_type = params.get('type') or service.default_type
        status, body = execute(service, query_type, lambda: service.query(params))
        print(json.dumps(body, indent=2))
        return 0 if status == 200 else 1

    def serve(self, args) -> int:
        settings = ServiceConfig(args.config)
        if args.host:
            settings.update('server.host', args.host)
        if args.port:
            settings.update('server.port', args.port)

        log_file = LogConfig.from_settings(settings).setup_logging()
        app = create_app(settings)
        print(f"chainlens API listening on {settings.get('server.host')}:{settings.get('server.port')}"
              + (f" (logging to {log_file})" if log_file else ""))
        uvicorn.run(
            app,
            host=settings.get('server.host'),
            port=settings.get('server.port'),
            log_config=None,
        )
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return CLI().main(sys.argv[1:] if argv is None else argv)


if __name__ == '__main__':
    sys.exit(main())
