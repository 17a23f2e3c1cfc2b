"""
Advisory Prompts
Prompt templates, system instructions and user-facing fallback messages.
All user-facing text is Simplified Chinese.
"""

# ============================================================================
# DAILY LOG SUMMARY
# ============================================================================

DAILY_SUMMARY_PROMPT = """你是一位专业的儿科健康助手。请分析以下1-3岁幼儿的日常活动记录。
总结当天的饮食（营养）、饮水（补水）和排泄情况。
指出任何潜在的健康关注点（例如喝水太少、大便不规律等）或表扬良好的习惯。
请用简体中文回答，语气亲切鼓励，言简意赅（不超过200字）。

记录日志（按提供的顺序排列）:
{log_text}
"""

DAILY_SUMMARY_SYSTEM_INSTRUCTION = (
    "你是一位乐于助人、充满关爱的儿科助手。请提供安全、通用的建议。所有回答必须使用简体中文。"
)

SUMMARY_NO_LOGS_MESSAGE = "暂无记录可供分析。"
SUMMARY_EMPTY_MESSAGE = "无法生成分析报告。"
SUMMARY_ERROR_MESSAGE = "生成摘要时出错，请重试。"

# ============================================================================
# KNOWLEDGE
# ============================================================================

KNOWLEDGE_PROMPT = """针对1-3岁幼儿的父母，请提供关于以下问题的权威建议：{query}。
请优先引用知名育儿网站或医疗机构（如CDC、AAP、丁香医生、育学园等）的内容。
请用简体中文回答。"""

KNOWLEDGE_EMPTY_MESSAGE = "未找到相关建议。"
KNOWLEDGE_ERROR_MESSAGE = "抱歉，暂时无法获取该信息。"

# ============================================================================
# ILLNESS GUIDANCE
# ============================================================================

MEDICAL_DISCLAIMER = "我是一个AI助手，不是医生。具体的医疗建议请务必咨询专业儿科医生。"

ILLNESS_PROMPT = """我家里1-3岁的宝宝出现了以下症状：{symptoms}。
有哪些标准的家庭护理建议？出现什么情况需要立即去医院？
请用简体中文回答。"""

ILLNESS_SYSTEM_INSTRUCTION = (
    f"你是一位医疗信息助手。你必须以免责声明开头：'{MEDICAL_DISCLAIMER}' "
    "然后基于搜索结果提供通用的护理建议。请用简体中文回答。"
)

ILLNESS_EMPTY_MESSAGE = "未找到相关指导信息。"
ILLNESS_ERROR_MESSAGE = "获取医疗信息失败。如果情况紧急，请立即就医。"

# ============================================================================
# EMERGENCY GUIDE
# ============================================================================

EMERGENCY_GUIDE_PROMPT = """针对1-3岁幼儿发生的紧急情况：【{scenario}】，请提供立即、分步骤的急救指南。
内容必须极其清晰、可操作性强。使用项目符号列出。
请用简体中文回答。"""

# Illustrations stay non-photorealistic and free of text
EMERGENCY_ILLUSTRATION_PROMPT = (
    "Educational medical illustration showing the correct first aid position "
    "for a toddler regarding: {scenario}. Simple, clear line art or soft color "
    "style. Safe for viewing. No text in image."
)

EMERGENCY_EMPTY_MESSAGE = "请遵循标准的急救流程。"
EMERGENCY_ERROR_MESSAGE = "急救服务出错。请立即拨打120或当地急救电话。"
