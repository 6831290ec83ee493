"""Prompt templates for outline, slide and writing generation."""
from aippt.models.theme import Language

STYLE_DESCRIPTIONS = {
    "通用": "通用风格",
    "学术风": "学术风格",
    "职场风": "职场商务风格",
    "教育风": "教育培训风格",
    "营销风": "营销推广风格",
}
DEFAULT_STYLE_DESCRIPTION = "通用风格"

WRITING_COMMANDS = {
    "改写": "请重新表述以下内容，保持原意但改变表达方式：\n\n{content}",
    "扩写": "请详细扩展以下内容，增加相关信息和细节：\n\n{content}",
    "缩写": "请精简以下内容，保留核心信息：\n\n{content}",
}


def user_message(prompt: str) -> list[dict]:
    return [{"role": "user", "content": prompt}]


def build_outline_prompt(content: str, language: Language) -> str:
    """Prompt for a presentation outline in PPTist AIPPT JSON."""
    return f"""{language.labels.instruction}为"{content}"生成PPT大纲。

要求：
1. 返回标准的JSON格式，符合PPTist的AIPPT类型定义
2. 包含封面页、目录页、过渡页、内容页、结束页
3. 每个内容页包含2-4个要点
4. 内容要有逻辑性和层次性

JSON格式示例：
[
  {{
    "type": "cover",
    "data": {{
      "title": "标题",
      "text": "副标题或描述"
    }}
  }},
  {{
    "type": "contents",
    "data": {{
      "items": ["目录项1", "目录项2", "目录项3"]
    }}
  }}
]"""


def build_slides_prompt(outline: str, language: Language, style: str) -> str:
    """Prompt for full slide data, one JSON object per line."""
    style_description = STYLE_DESCRIPTIONS.get(style, DEFAULT_STYLE_DESCRIPTION)
    return f"""{language.labels.instruction}根据以下大纲生成完整的PPT数据：

大纲内容：
{outline}

要求：
1. 风格：{style_description}
2. 返回流式JSON数据，每行一个完整的JSON对象
3. 严格按照PPTist的AIPPT类型定义格式
4. 每个内容项控制在合理字数内
5. 保持内容的连贯性和专业性

请逐个返回PPT页面数据，每个JSON对象一行。"""


def build_writing_prompt(content: str, command: str) -> str:
    """Prompt for a writing command; unknown commands send the content as-is."""
    template = WRITING_COMMANDS.get(command)
    return template.format(content=content) if template else content
