import asyncio
import logging
from cqlmapper.demo import main


if __name__ == '__main__':
    # docker run -d -p 9042:9042 --name cassandra cassandra:4.1
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
