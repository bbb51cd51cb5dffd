"""API v1 汇总路由：统一挂载所有版本化的子路由。"""

from fastapi import APIRouter

from app.packages.orgchart.api.v1.endpoints import chart, employees, levels

api_router = APIRouter()
api_router.include_router(employees.router)
api_router.include_router(chart.router)
api_router.include_router(levels.router)
