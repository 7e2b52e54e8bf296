schedule_generate_description = """
Generate a shift schedule for a group of employees over whole weeks.

### Request Body

- `data`: A `SchedulingData` object, which contains the following information:
    - `employees`: Names of the employees, indexed from 0
    - `numWeeks`: Number of weeks in the horizon (days are `numWeeks * 7`, Monday first)
    - `shifts`: Shift labels; index 0 is the day off (Default: ["-", "M", "A", "N"])

    - `consecutiveShiftConstraints`: Run-length policies, each as an object or the list
      `[shift, hardMin, softMin, minPenalty, softMax, hardMax, maxPenalty]`
    - `weeklySumConstraints`: Per-week count policies in the same form

    - `fixedAssignments`: Pre-assigned `{employee, shift, day}` entries
    - `requests`: Weighted wishes `{employee, shift, day, weight}`; a negative weight
      means the assignment is desired, a positive weight that it is unwanted

    - `dailyShiftDemands`: 7 rows (Monday to Sunday) of minimum cover per working shift
    - `excessCoverPenalties`: Penalty per employee above the demand, one per working shift
    - `shiftTransitionPenalties`: `{previousShift, nextShift, penalty}`; a penalty of 0
      forbids the transition

- `timeLimit`: Solver time limit in seconds (Default: 30)
- `numWorkers`: Number of parallel search workers (Default: 8)
- `randomSeed`: Solver random seed (Optional)

### Response

- `schedule`: One record per employee with the shift label of each day
- `summary`: Days on each shift, requests granted/violated and weekly sum penalty per employee
- `penalties`: Objective contribution of each rule family
- `metrics`: Solver status, objective value, penalty total, best bound and wall time

### Errors

- `400`: Inconsistent input (indices out of range, bad demand table, invalid policy)
- `422`: The problem is infeasible or no solution was found within the time limit
"""
