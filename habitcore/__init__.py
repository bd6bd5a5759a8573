"""habitcore: habit analytics engine.

Public API re-exports for convenient imports:
    from habitcore import Habit, streak, strength_percentage, ...
"""

# Workspace & config
from habitcore.workspace import (
    workspace_root,
    config_path,
    exports_dir,
    load_config,
    save_config,
    get_user_timezone,
    now_local,
    today_local,
)

# File I/O
from habitcore.fileio import (
    read_json,
    read_yaml,
    write_json_atomic,
    write_yaml_atomic,
)

# Calendar days
from habitcore.dates import (
    day_of,
    resolve_today,
    today_minus_days_ago,
    days_between,
    is_within_last_days,
    week_start,
    week_days,
    date_range,
)

# Models
from habitcore.models import (
    BOOLEAN,
    COUNTER,
    HABIT_TYPES,
    Habit,
    HabitDuration,
    HabitOverview,
    day_to_timestamp,
    timestamp_to_day,
)

# Durations
from habitcore.durations import (
    effective_duration,
    current_duration,
    validate_duration,
    set_duration,
    remove_duration,
)

# Counters
from habitcore.counters import (
    counter_value,
    set_counter_value,
    increment_counter,
    decrement_counter,
    cleanup_daily_counters,
)

# Completion
from habitcore.completion import (
    is_completed,
    is_completed_days_ago,
    add_completed_date,
    remove_completed_date,
    toggle_completion,
    is_week_completed,
    toggle_week_completion,
    backfill_completions,
)

# Streaks & strength
from habitcore.streaks import (
    STRENGTH_CALCULATION_PERIOD,
    process_dates_for_streak_calculation,
    streak,
    longest_streak,
    calculate_logarithm_base,
    calculate_strength_percentage,
    strength_percentage,
    strength_gained_within_last_days,
)

# Aggregates
from habitcore.aggregates import (
    time_spent_on,
    get_total_time_spent,
    get_total_time_spent_in_last_month,
    get_total_time_spent_in_last_year,
    completions_within_last_days,
    build_overview,
)

# Export
from habitcore.exporting import (
    EXPORT_VERSION,
    export_filename,
    build_export,
    parse_export,
    write_export,
    load_export,
)
