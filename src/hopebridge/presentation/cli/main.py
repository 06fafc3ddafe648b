"""
CLI 入口点

提供命令行接口：演示完整流程、单次校验文档、查看样例学生、启动 HTTP 服务。
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from hopebridge import __version__
from hopebridge.bootstrap import build_controller, build_gateway, build_upload_flow
from hopebridge.config import AppConfig, setup_logging
from hopebridge.core.errors import HopeBridgeError
from hopebridge.domain import Role, Screen, get_student, list_students
from hopebridge.presentation.screens import render_outcome, render_screen
from hopebridge.verification import guess_mime_type

SAMPLE_DOCUMENT = b"HopeBridge sample marks memo"


def create_parser() -> argparse.ArgumentParser:
    """创建 CLI 参数解析器"""
    parser = argparse.ArgumentParser(
        prog="hopebridge",
        description="HopeBridge - 学生与捐助者对接原型",
    )
    parser.add_argument("--version", "-v", action="store_true", help="显示版本")
    parser.add_argument("--config", "-c", help="YAML 配置文件路径")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # demo 命令
    demo_parser = subparsers.add_parser("demo", help="按脚本走一遍页面流程")
    demo_parser.add_argument("--role", choices=[Role.STUDENT.value, Role.DONOR.value], default=Role.STUDENT.value)
    demo_parser.add_argument("--name", default="Asha", help="学生姓名")
    demo_parser.add_argument("--file", "-f", help="上传的成绩单图片（缺省使用内置样例）")
    demo_parser.add_argument("--budget", type=int, default=2000, help="捐助者月度预算")
    demo_parser.add_argument("--gender", default="Girls Only", help="捐助者性别偏好")
    demo_parser.add_argument("--student-id", default="1", help="捐助者查看的学生 ID")

    # verify 命令
    verify_parser = subparsers.add_parser("verify", help="校验单个文档")
    verify_parser.add_argument("file", help="图片路径")
    verify_parser.add_argument("--mime-type", help="覆盖自动识别的 MIME 类型")

    # students 命令
    students_parser = subparsers.add_parser("students", help="查看样例学生")
    students_parser.add_argument("--id", dest="student_id", help="只显示指定学生")

    # serve 命令
    serve_parser = subparsers.add_parser("serve", help="启动 HTTP 服务")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def run_cli(args: Optional[list] = None) -> int:
    """
    运行 CLI

    Args:
        args: 命令行参数（默认使用 sys.argv）

    Returns:
        退出码
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"HopeBridge v{__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    try:
        config = AppConfig.load(parsed.config)
        setup_logging(config.logging)

        if parsed.command == "demo":
            asyncio.run(_demo(parsed, config))
        elif parsed.command == "verify":
            asyncio.run(_verify(parsed, config))
        elif parsed.command == "students":
            _students(parsed.student_id)
        elif parsed.command == "serve":
            _serve(config, parsed.host, parsed.port)
        return 0

    except (HopeBridgeError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


async def _demo(parsed: argparse.Namespace, config: AppConfig) -> None:
    """按脚本演示一个角色的完整流程"""
    controller = build_controller(config)
    # 每次导航都重新渲染（相当于滚动回顶部）
    controller.add_navigation_listener(lambda state: print("\n" + render_screen(state)))
    print(render_screen(controller.state))

    if parsed.role == Role.DONOR.value:
        controller.choose_role(Role.DONOR)
        controller.update_donor_preferences(budget=parsed.budget, gender=parsed.gender)
        controller.save_donor_preferences()
        controller.navigate(Screen.MATCHED_STUDENTS)
        controller.open_student(parsed.student_id)
        return

    controller.choose_role(Role.STUDENT)
    controller.submit_student_registration(name=parsed.name)
    controller.navigate(Screen.UPLOAD_MARKS)

    flow = build_upload_flow(controller, build_gateway(config), config)
    if parsed.file:
        path = Path(parsed.file)
        flow.select_file(path.read_bytes(), guess_mime_type(path.name), path.name)
    else:
        flow.select_file(SAMPLE_DOCUMENT, "image/jpeg", "sample.jpg")

    print("\nVerifying using AI...")
    outcome = await flow.verify()
    print(render_outcome(outcome))
    if flow.pending_return is not None:
        await flow.pending_return


async def _verify(parsed: argparse.Namespace, config: AppConfig) -> None:
    """校验单个文档并输出 JSON"""
    path = Path(parsed.file)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    mime_type = parsed.mime_type or guess_mime_type(path.name)
    gateway = build_gateway(config)
    outcome = await gateway.verify(path.read_bytes(), mime_type)
    print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2))


def _students(student_id: Optional[str]) -> None:
    if student_id:
        student = get_student(student_id)
        if student is None:
            print(f"Student not found: {student_id}", file=sys.stderr)
            return
        students = [student]
    else:
        students = list_students()
    print(json.dumps([s.to_dict() for s in students], ensure_ascii=False, indent=2))


def _serve(config: AppConfig, host: str, port: int) -> None:
    import uvicorn

    from hopebridge.api.main import create_app

    uvicorn.run(create_app(config), host=host, port=port)


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
