"""Prisma templates: services talk to the generated client through PrismaService."""

from nestgen.core.names import NameSet


def service(n: NameSet) -> str:
    return f"""
import {{ Injectable, NotFoundException }} from '@nestjs/common';
import {{ PrismaService }} from '../prisma/prisma.service';
import {{ {n.pascal}, Prisma }} from '@prisma/client';

@Injectable()
export class {n.pascal}Service {{
  constructor(private prisma: PrismaService) {{}}

  async create(data: Prisma.{n.pascal}CreateInput): Promise<{n.pascal}> {{
    return this.prisma.{n.camel}.create({{ data }});
  }}

  async findAll(): Promise<{n.pascal}[]> {{
    return this.prisma.{n.camel}.findMany({{ where: {{ deletedAt: null }} }});
  }}

  async findOne(id: string): Promise<{n.pascal}> {{
    const item = await this.prisma.{n.camel}.findUnique({{ where: {{ {n.camel}Id: BigInt(id) }} }});
    if (!item) throw new NotFoundException(`{n.pascal} ${{id}} not found`);
    return item;
  }}
}}
"""


def service_spec(n: NameSet) -> str:
    return f"""
import {{ Test, TestingModule }} from '@nestjs/testing';
import {{ {n.pascal}Service }} from './{n.kebab}.service';
import {{ PrismaService }} from '../prisma/prisma.service';

describe('{n.pascal}Service', () => {{
  let service: {n.pascal}Service;

  beforeEach(async () => {{
    const module: TestingModule = await Test.createTestingModule({{
      providers: [{n.pascal}Service, {{ provide: PrismaService, useValue: {{}} }}],
    }}).compile();

    service = module.get<{n.pascal}Service>({n.pascal}Service);
  }});

  it('should be defined', () => {{
    expect(service).toBeDefined();
  }});
}});
"""


def controller(n: NameSet) -> str:
    return f"""
import {{ Body, Controller, Get, Param, Post, UseGuards }} from '@nestjs/common';
import {{ {n.pascal}Service }} from './{n.kebab}.service';
import {{ JwtAuthGuard }} from '../auth/guards/jwt-auth.guard';

@Controller('{n.kebab}s')
@UseGuards(JwtAuthGuard)
export class {n.pascal}Controller {{
  constructor(private readonly service: {n.pascal}Service) {{}}

  @Post()
  create(@Body() data: any) {{
    return this.service.create(data);
  }}

  @Get()
  findAll() {{
    return this.service.findAll();
  }}

  @Get(':id')
  findOne(@Param('id') id: string) {{
    return this.service.findOne(id);
  }}
}}
"""


def controller_spec(n: NameSet) -> str:
    return f"""
import {{ Test, TestingModule }} from '@nestjs/testing';
import {{ {n.pascal}Controller }} from './{n.kebab}.controller';
import {{ {n.pascal}Service }} from './{n.kebab}.service';

describe('{n.pascal}Controller', () => {{
  let controller: {n.pascal}Controller;

  beforeEach(async () => {{
    const module: TestingModule = await Test.createTestingModule({{
      controllers: [{n.pascal}Controller],
      providers: [{{ provide: {n.pascal}Service, useValue: {{}} }}],
    }}).compile();

    controller = module.get<{n.pascal}Controller>({n.pascal}Controller);
  }});

  it('should be defined', () => {{
    expect(controller).toBeDefined();
  }});
}});
"""


def module(n: NameSet) -> str:
    return f"""
import {{ Module }} from '@nestjs/common';
import {{ {n.pascal}Controller }} from './{n.kebab}.controller';
import {{ {n.pascal}Service }} from './{n.kebab}.service';

@Module({{
  controllers: [{n.pascal}Controller],
  providers: [{n.pascal}Service],
  exports: [{n.pascal}Service],
}})
export class {n.pascal}Module {{}}
"""
