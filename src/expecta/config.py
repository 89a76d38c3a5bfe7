"""配置常量和环境变量加载"""

import os

# 日志配置
LOG_LEVEL = os.getenv("EXPECTA_LOG_LEVEL", "WARNING")

# 组合消息格式
ALL_OF_PREFIX = "match all of: "
ALL_OF_SEPARATOR = ", and "
ALL_OF_ITEM_FORMAT = "{{{}}}"  # 每个子描述用花括号包起来

# 固定提示
EMPTY_MATCHERS_MESSAGE = "satisfyAllOf must be called with at least one matcher"
UNSUPPORTED_MATCHER_MESSAGE = "satisfyAllOf matchers must implement satisfies() or matches()"
BE_NIL_HINT = " (use be_nil() to match nils)"
NIL_DESCRIPTION = "<nil>"
