"""AppleScript builders, script runner, data-dir lookup, offline launch and output parsers for Things."""