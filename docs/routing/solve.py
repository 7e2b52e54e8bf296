routing_solve_description = """
Plan vehicle routes with capacities, time windows and pickup/delivery pairs.

### Request Body

- `data`: A `RoutingData` object, which contains the following information:
    - `distanceMatrix`: Node × node distances in metres
    - `timeMatrix`: Node × node travel times in minutes
    - `vehicles`: List of `{start, end, capacity, endTime}`; `endTime` is minutes since
      midnight or an "HH:MM" string

    - `demands`: Load change at each node (positive at pickups, negative at deliveries)
    - `timeWindows`: `[earliest, latest]` per node, in minutes or "HH:MM"
    - `pickupsDeliveries`: `[pickup, delivery]` node pairs served by the same vehicle,
      pickup first
    - `serviceTimes`: Minutes spent at each node (Optional)

    - `maxRouteDistance`: Longest allowed route in metres
    - `distanceSpanCost`: Cost per metre between the longest and shortest routes
    - `timeSlack`: Longest allowed wait at a node, in minutes

- `timeLimit`: Search time limit in seconds (Default: 2)

### Response

- `stops`: One record per visit with vehicle, position, node, kind (P/D/depot),
  load on board, cumulative distance and arrival time range
- `totals`: Objective, total and per-vehicle distance, vehicles used, span cost and status

### Errors

- `400`: Invalid tables (non-square matrices, windows out of order, depot in a pair)
- `422`: No route plan exists or none was found within the time limit
"""
