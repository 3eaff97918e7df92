import sys

from restaurant_orders.main import main

sys.exit(main())
